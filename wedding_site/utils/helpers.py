from datetime import datetime, timezone


def now_iso():
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso(value):
    """Parse a stored ISO-8601 timestamp into an aware datetime.

    Naive timestamps are taken as UTC. Unparseable values sort as the epoch.
    """
    try:
        dt = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except (ValueError, TypeError):
        return datetime.fromtimestamp(0, timezone.utc)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def clean_text(text):
    """Trimmed text as the guest typed it. Escaping is left to whatever renders it."""
    if text is None:
        return ""
    return str(text).strip()


def optional_text(text):
    """Optional free-text field; blank becomes None."""
    cleaned = clean_text(text)
    return cleaned or None


def coerce_guest_count(value):
    """Party size from form input, falling back to 1 for anything unusable."""
    if isinstance(value, bool):
        return 1
    try:
        count = int(value)
    except (ValueError, TypeError):
        return 1
    return count if count > 0 else 1
