import logging
import threading
from pathlib import Path

from wedding_site.errors import PersistenceError
from wedding_site.models import RsvpRecord
from wedding_site.utils.file_lock import read_json, write_json
from wedding_site.utils.helpers import now_iso

logger = logging.getLogger(__name__)


def _empty_document():
    return {"responses": [], "nextId": 1}


class ResponseStore:
    """RSVP records kept in memory and mirrored to one JSON document.

    The document layout is ``{"responses": [...], "nextId": n}``. Every
    mutation rewrites the whole document before returning, and the in-memory
    state only changes once that write has succeeded. A single lock
    serializes read-modify-write-persist so concurrent requests never share
    an id or drop each other's changes.
    """

    def __init__(self, path):
        self.path = Path(path)
        self._lock = threading.Lock()
        self._responses = []
        self._next_id = 1
        self._loaded = False

    def load(self):
        with self._lock:
            self._load()

    def flush(self):
        with self._lock:
            self._ensure_loaded()
            self._write(self._responses, self._next_id)

    def append(self, fields):
        """Store a new record built from ``fields`` and return its id."""
        with self._lock:
            self._ensure_loaded()
            data = dict(fields)
            data["id"] = self._next_id
            data.setdefault("created_at", now_iso())
            record = RsvpRecord.from_dict(data)

            responses = self._responses + [record]
            next_id = record.id + 1
            self._write(responses, next_id)

            self._responses = responses
            self._next_id = next_id
            return record.id

    def delete_by_id(self, record_id):
        with self._lock:
            self._ensure_loaded()
            remaining = [r for r in self._responses if r.id != record_id]
            if len(remaining) == len(self._responses):
                return False
            self._write(remaining, self._next_id)
            self._responses = remaining
            return True

    def list_all(self):
        with self._lock:
            self._ensure_loaded()
            return list(self._responses)

    def _ensure_loaded(self):
        if not self._loaded:
            self._load()

    def _load(self):
        try:
            data = read_json(self.path, default=_empty_document())
        except (OSError, ValueError) as e:
            raise PersistenceError(f"Could not read responses from {self.path}") from e
        if not isinstance(data, dict) or not isinstance(data.get("responses", []), list):
            raise PersistenceError(f"Unexpected document layout in {self.path}")

        try:
            responses = [RsvpRecord.from_dict(item) for item in data.get("responses", [])]
            highest = max((r.id for r in responses), default=0)
            # Never hand out an id that is already on disk, even if nextId lags.
            next_id = max(int(data.get("nextId") or 1), highest + 1)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise PersistenceError(f"Malformed response record in {self.path}") from e

        self._responses = responses
        self._next_id = next_id
        self._loaded = True
        logger.info("Loaded %d RSVP response(s) from %s (next id %d)", len(responses), self.path, next_id)

    def _write(self, responses, next_id):
        document = {
            "responses": [r.to_dict() for r in responses],
            "nextId": next_id,
        }
        try:
            write_json(self.path, document)
        except (OSError, TypeError, ValueError) as e:
            logger.exception("Failed to write responses to %s", self.path)
            raise PersistenceError("Failed to save responses") from e
