# hello_api/core/logging.py

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    All diagnostics go to stdout, including startup and shutdown lines.
    Calling it again only changes the level.
    """
    logging.basicConfig(stream=sys.stdout, format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())
