import logging

from wedding_site.errors import AuthError, NotFound
from wedding_site.utils.helpers import parse_iso

logger = logging.getLogger(__name__)

CSV_HEADERS = ["ID", "Guest Name", "Email", "Attending", "Guest Count", "Dietary Restrictions", "Message", "Date"]


def _quote(text):
    """Always-quoted CSV cell with embedded quotes doubled."""
    return '"' + (text or "").replace('"', '""') + '"'


def _csv_row(record):
    return ",".join([
        str(record.id),
        _quote(record.guest_name),
        _quote(record.email),
        record.attending,
        str(record.guest_count),
        _quote(record.dietary),
        _quote(record.message),
        record.created_at,
    ])


class AdminQueryService:
    """Read and housekeeping operations behind the admin password."""

    def __init__(self, store, config_store):
        self.store = store
        self.config_store = config_store

    def authenticate(self, password):
        expected = self.config_store.admin_password()
        if not expected or password is None or password != expected:
            raise AuthError("Unauthorized")

    def list_responses(self):
        """All responses, newest first. Equal timestamps keep storage order."""
        return sorted(self.store.list_all(), key=lambda r: parse_iso(r.created_at), reverse=True)

    def delete_response(self, record_id):
        if not self.store.delete_by_id(record_id):
            raise NotFound("Response not found")
        logger.info("RSVP %d deleted", record_id)
        return True

    def compute_stats(self):
        responses = self.store.list_all()
        yes = [r for r in responses if r.attending == "yes"]
        return {
            "total": len(responses),
            "attending": len(yes),
            "notAttending": sum(1 for r in responses if r.attending == "no"),
            "maybe": sum(1 for r in responses if r.attending == "maybe"),
            "totalGuests": sum(r.guest_count or 1 for r in yes),
        }

    def export_csv(self):
        rows = [",".join(CSV_HEADERS)]
        rows.extend(_csv_row(r) for r in self.list_responses())
        return "\n".join(rows)
