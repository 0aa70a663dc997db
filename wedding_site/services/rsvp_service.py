import logging

from wedding_site.errors import ValidationError
from wedding_site.models import ATTENDING_CHOICES
from wedding_site.utils.helpers import clean_text, coerce_guest_count, optional_text

logger = logging.getLogger(__name__)


class RsvpService:
    """Accepts RSVP submissions from the public form."""

    def __init__(self, store):
        self.store = store

    def submit(self, payload):
        """Validate a submission and store it. Returns the new record id.

        ``guest_name`` and ``attending`` are required; everything else is
        optional and ``guest_count`` quietly falls back to 1.
        """
        payload = payload if isinstance(payload, dict) else {}

        guest_name = clean_text(payload.get("guest_name"))
        attending = payload.get("attending")
        if not guest_name or not attending:
            raise ValidationError("Guest name and attendance status are required")
        if attending not in ATTENDING_CHOICES:
            raise ValidationError(f"Attendance must be one of: {', '.join(ATTENDING_CHOICES)}")

        record_id = self.store.append({
            "guest_name": guest_name,
            "email": optional_text(payload.get("email")),
            "attending": attending,
            "guest_count": coerce_guest_count(payload.get("guest_count")),
            "dietary": optional_text(payload.get("dietary")),
            "message": optional_text(payload.get("message")),
        })
        logger.info("RSVP %d saved: attending=%s", record_id, attending)
        return record_id
