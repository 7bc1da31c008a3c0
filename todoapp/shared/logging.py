"""
Logging configuration for the application.

One pipe-separated line per record, written to stdout.
Logging must not change program behavior.
Never logs request bodies or user emails.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Kept at WARNING unless the application itself runs at DEBUG.
QUIET_LOGGERS = ("uvicorn.access", "uvicorn.error", "sqlalchemy.engine")


def resolve_level(level: str) -> int:
    """Map a level name to its logging constant, falling back to INFO."""
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the application.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """
    root_level = resolve_level(level)
    logging.basicConfig(
        level=root_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    quiet_level = logging.DEBUG if root_level <= logging.DEBUG else logging.WARNING
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)
