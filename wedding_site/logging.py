import logging
import sys
from logging import StreamHandler

from wedding_site.config import DEBUG, LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level=None):
    if level is None:
        level = logging.DEBUG if DEBUG else getattr(logging, LOG_LEVEL, logging.INFO)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[StreamHandler(sys.stdout)],
    )
