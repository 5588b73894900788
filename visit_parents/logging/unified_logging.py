"""
Unified logging format with importance (0-10) for command-line output.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

# Default importance (0-10) per standard level when not set explicitly
LEVEL_TO_IMPORTANCE = {
    "DEBUG": 2,
    "INFO": 4,
    "WARNING": 6,
    "ERROR": 8,
    "CRITICAL": 10,
}

UNIFIED_DATE_FMT = "%Y-%m-%d %H:%M:%S"
UNIFIED_FORMAT_STR = "%(asctime)s | %(levelname)-8s | %(importance)s | %(message)s"

PACKAGE_LOGGER = "visit_parents"


def importance_from_level(level_name: str) -> int:
    """Return importance 0-10 for a standard log level name. Returns 4 for unknown."""
    return LEVEL_TO_IMPORTANCE.get((level_name or "").strip().upper(), 4)


def _set_importance_if_missing(record: logging.LogRecord) -> None:
    if getattr(record, "importance", None) is None:
        record.importance = importance_from_level(record.levelname)


class UnifiedFormatter(logging.Formatter):
    """
    Formatter that outputs: timestamp | level | importance | message.

    Importance comes from ``extra={"importance": N}`` or is derived from level.
    """

    def format(self, record: logging.LogRecord) -> str:
        _set_importance_if_missing(record)
        return super().format(record)


def create_unified_formatter(
    fmt: str = UNIFIED_FORMAT_STR,
    datefmt: str = UNIFIED_DATE_FMT,
) -> UnifiedFormatter:
    """Create a UnifiedFormatter with project default format and date format."""
    return UnifiedFormatter(fmt=fmt, datefmt=datefmt)


def configure_logging(
    level: str = "WARNING", stream: Optional[TextIO] = None
) -> logging.Handler:
    """
    Attach a unified-format stream handler to the package logger.

    Calling it again replaces the handler installed by the previous call, so
    repeated CLI invocations in one process do not duplicate output.

    Args:
        level: Standard level name
        stream: Target stream (default: stderr)

    Returns:
        The installed handler
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_visit_parents_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(create_unified_formatter())
    handler._visit_parents_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    return handler
