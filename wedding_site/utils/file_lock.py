import json
import os
import sys
import tempfile
from pathlib import Path
from contextlib import contextmanager

# Cross-platform file locking
if sys.platform == "win32":
    import msvcrt

    # msvcrt has no shared mode, so readers also take the blocking lock.
    def _lock_shared(f):
        f.seek(0)
        msvcrt.locking(f.fileno(), msvcrt.LK_LOCK, 1)

    def _lock_exclusive(f):
        f.seek(0)
        msvcrt.locking(f.fileno(), msvcrt.LK_LOCK, 1)

    def _unlock(f):
        try:
            f.seek(0)
            msvcrt.locking(f.fileno(), msvcrt.LK_UNLCK, 1)
        except OSError:
            pass
else:
    import fcntl

    def _lock_shared(f):
        fcntl.flock(f.fileno(), fcntl.LOCK_SH)

    def _lock_exclusive(f):
        fcntl.flock(f.fileno(), fcntl.LOCK_EX)

    def _unlock(f):
        fcntl.flock(f.fileno(), fcntl.LOCK_UN)


def _lock_path(filepath):
    return filepath.with_name(filepath.name + ".lock")


@contextmanager
def file_lock(filepath, exclusive=True):
    """Hold an OS lock on a sidecar ``<name>.lock`` file.

    The data file itself is swapped out by ``os.replace`` on every write, so
    the lock lives on a file that is never replaced.
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(_lock_path(filepath), "a+") as f:
        if exclusive:
            _lock_exclusive(f)
        else:
            _lock_shared(f)
        try:
            yield
        finally:
            _unlock(f)


def write_json(filepath, data):
    """Atomically replace a JSON file while holding an exclusive lock.

    The document is written to a temp file in the same directory, fsynced and
    renamed over the target, so readers see either the old or the new
    document. Any ``OSError`` or serialization error propagates to the caller.
    """
    filepath = Path(filepath)
    with file_lock(filepath):
        fd, tmp_name = tempfile.mkstemp(dir=filepath.parent, prefix=filepath.name, suffix=".tmp")
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(data, f, indent=2, default=str)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, filepath)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise


def read_json(filepath, default=None):
    """Read a JSON file with a shared lock.

    Returns ``default`` (a fresh empty dict when not given) for a missing or
    empty file.
    """
    filepath = Path(filepath)
    if default is None:
        default = {}
    if not filepath.exists():
        return default
    with file_lock(filepath, exclusive=False):
        with open(filepath, "r") as f:
            content = f.read().strip()
            return json.loads(content) if content else default
