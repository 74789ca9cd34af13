"""Console logging for the command line tool.

Informational messages go to stdout and warnings or errors go to stderr,
mirroring how the tool reports progress versus failures.
"""
from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "util_dotenv"
QUIET_LEVEL = logging.CRITICAL + 1


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int):
        super().__init__()
        self.max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self.max_level


def configure_logging(level: str = "INFO", quiet: bool = False) -> logging.Logger:
    """Set up the package logger. Safe to call more than once.

    Args:
        level: Name of the lowest level to emit, e.g. ``"DEBUG"``.
        quiet: Suppress every message regardless of ``level``.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    formatter = logging.Formatter("%(message)s")

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(_MaxLevelFilter(logging.INFO))
    stdout_handler.setFormatter(formatter)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(formatter)

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)

    if quiet:
        logger.setLevel(QUIET_LEVEL)
        return logger

    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logger.setLevel(resolved)
    return logger
