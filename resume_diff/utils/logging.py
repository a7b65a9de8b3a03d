"""Logging setup for the resume-diff package.

Every module logs through ``logging.getLogger(__name__)``; those loggers live
under the ``resume_diff`` namespace, so configuring that one logger here
routes the diff service and CLI output to a single handler.
"""

import logging
import sys
from typing import TextIO

PACKAGE_LOGGER = "resume_diff"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: logging.Handler | None = None


def configure_logging(
    level: str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Attach a stream handler to the package logger and set its level.

    Calling again only changes the level, unless ``stream`` is given, in which
    case the handler is replaced so output goes to the new stream.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL (case-insensitive).
               Unknown or missing values fall back to INFO.
        stream: Destination for log records. Defaults to stderr.

    Returns:
        The ``resume_diff`` logger.
    """
    global _handler

    logger = logging.getLogger(PACKAGE_LOGGER)
    log_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    if _handler is None or stream is not None:
        if _handler is not None:
            logger.removeHandler(_handler)
        _handler = logging.StreamHandler(stream or sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(_handler)
        # stdout stays reserved for the CLI report
        logger.propagate = False

    logger.setLevel(log_level)
    _handler.setLevel(log_level)
    return logger


def reset_logging() -> None:
    """Detach the package handler and restore defaults (used by tests)."""
    global _handler

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True

    _handler = None
