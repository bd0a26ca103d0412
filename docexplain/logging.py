"""Logging setup for the demo app and command-line use."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure the ``docexplain`` logger with a single stdout handler."""
    log_level = getattr(logging, level.upper(), logging.INFO)
    package_logger = logging.getLogger("docexplain")
    package_logger.setLevel(log_level)
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
