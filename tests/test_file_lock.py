import importlib
import json
import sys
import types

import pytest

from wedding_site.utils import file_lock


@pytest.fixture
def windows_file_lock(monkeypatch):
    """file_lock reloaded as if running on Windows, with msvcrt recorded."""
    calls = []
    fake_msvcrt = types.SimpleNamespace(
        LK_UNLCK=0,
        LK_LOCK=1,
        LK_NBLCK=2,
        locking=lambda fd, mode, nbytes: calls.append(mode),
    )
    monkeypatch.setitem(sys.modules, "msvcrt", fake_msvcrt)
    monkeypatch.setattr(sys, "platform", "win32")
    module = importlib.reload(file_lock)
    yield module, calls, fake_msvcrt
    monkeypatch.undo()
    importlib.reload(file_lock)


def test_windows_locks_block_instead_of_failing(windows_file_lock, tmp_path):
    """Readers and writers wait for the lock rather than using the non-blocking mode."""
    module, calls, fake_msvcrt = windows_file_lock
    path = tmp_path / "database.json"

    module.write_json(path, {"responses": [], "nextId": 1})
    assert module.read_json(path) == {"responses": [], "nextId": 1}

    lock_modes = [mode for mode in calls if mode != fake_msvcrt.LK_UNLCK]
    assert lock_modes == [fake_msvcrt.LK_LOCK, fake_msvcrt.LK_LOCK]
    assert fake_msvcrt.LK_NBLCK not in calls


def test_write_json_replaces_document(tmp_path):
    path = tmp_path / "nested" / "database.json"
    file_lock.write_json(path, {"nextId": 1})
    file_lock.write_json(path, {"nextId": 2})
    assert json.loads(path.read_text()) == {"nextId": 2}
    assert [p.name for p in path.parent.iterdir() if p.suffix == ".tmp"] == []


def test_read_json_missing_or_empty(tmp_path):
    path = tmp_path / "database.json"
    assert file_lock.read_json(path, default={"nextId": 1}) == {"nextId": 1}
    path.write_text("   ")
    assert file_lock.read_json(path) == {}
