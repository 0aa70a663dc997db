import logging
from pathlib import Path

from wedding_site.utils.file_lock import read_json

logger = logging.getLogger(__name__)

SECRET_SECTION = "admin"


class ConfigStore:
    """Site configuration read from a JSON file.

    The file is re-read on every access so edits take effect without a
    restart. The ``admin`` section holds the shared admin password and is
    never part of the public view.
    """

    def __init__(self, path):
        self.path = Path(path)

    def load(self):
        config = read_json(self.path)
        if not isinstance(config, dict):
            logger.warning("Config file %s is not a JSON object, ignoring it", self.path)
            return {}
        return config

    def public_view(self):
        return {k: v for k, v in self.load().items() if k != SECRET_SECTION}

    def admin_password(self):
        section = self.load().get(SECRET_SECTION) or {}
        return section.get("password")
