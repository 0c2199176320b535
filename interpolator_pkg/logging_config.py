"""Logging setup for the interpolator's API and CLI layers.

All loggers live under the ``"interpolator"`` namespace, so a single call to
``setup_logging`` controls what the api and cli modules emit. The numeric
modules do not log.
"""

import logging
import sys
from datetime import datetime
from typing import Optional

ROOT_LOGGER_NAME = "interpolator"


class StructuredFormatter(logging.Formatter):
    """One line per record: ``<iso time> [LEVEL] interpolator.<module>: message``.

    A traceback, when the record carries one, follows on the next lines.
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat()
        line = f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def _handler(handler: logging.Handler) -> logging.Handler:
    handler.setFormatter(StructuredFormatter())
    return handler


def setup_logging(
    level: str = "WARNING", log_file: Optional[str] = None
) -> logging.Logger:
    """Configure the interpolator logger, replacing earlier configuration.

    Args:
        level: Level name, case-insensitive; unknown names fall back to WARNING
        log_file: Also append records to this file

    Returns:
        The ``"interpolator"`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # handlers from a previous call (the CLI may run more than once in-process)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    logger.addHandler(_handler(logging.StreamHandler(sys.stderr)))
    if log_file:
        logger.addHandler(_handler(logging.FileHandler(log_file)))
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for an interpolator module, e.g. ``get_logger("api")``."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
