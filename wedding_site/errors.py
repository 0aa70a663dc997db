"""Error types raised by the RSVP services.

Each carries the HTTP status the API layer answers with; the message is sent
back as ``{"error": message}``.
"""


class SiteError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class ValidationError(SiteError):
    status_code = 400
    default_message = "Invalid request"


class AuthError(SiteError):
    status_code = 401
    default_message = "Unauthorized"


class NotFound(SiteError):
    status_code = 404
    default_message = "Not found"


class PersistenceError(SiteError):
    status_code = 500
    default_message = "Failed to save data"
