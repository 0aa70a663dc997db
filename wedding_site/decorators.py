"""
Request guards for the RSVP API.
"""

from functools import wraps
from flask import current_app, request

from wedding_site.errors import AuthError


def get_services():
    """Services bound to the running app by ``create_app``."""
    return current_app.extensions["wedding_site"]


def admin_required(f):
    """Decorator to require the shared admin password.

    The password is read from the ``X-Admin-Password`` header, or from the
    ``password`` query parameter so the CSV export works as a plain link.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        password = request.headers.get("X-Admin-Password") or request.args.get("password")
        try:
            get_services().admin.authenticate(password)
        except AuthError:
            current_app.logger.warning(f"Rejected admin request to {request.path} from {request.remote_addr}")
            raise
        return f(*args, **kwargs)
    return decorated_function
