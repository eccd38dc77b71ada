"""Centralized logger configuration.

Usage::

    from infra_creator.utils.logger import get_logger
    logger = get_logger(__name__)

Only the ``infra_creator`` logger hierarchy is configured; the root
logger is left alone.  Diagnostics go to stderr so they never mix with
menu output on stdout.
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER: str = "infra_creator"
DEFAULT_LEVEL: str = "WARNING"
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: str | None) -> int:
    """Map a level name to its numeric value, falling back to WARNING."""
    if not level:
        return logging.WARNING
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.WARNING


def setup_logging(level: str | None = DEFAULT_LEVEL) -> logging.Logger:
    """Configure the package logger once; later calls only adjust the level."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(resolve_level(level))
    if not any(getattr(h, "infra_creator_handler", False) for h in package_logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.infra_creator_handler = True  # type: ignore[attr-defined]
        package_logger.addHandler(handler)
    return package_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
