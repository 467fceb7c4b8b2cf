"""Shared logging utilities for consistent staffing-core observability.

Usage example:
    from hospitality_staffing.observability.logging import get_logger

    logger = get_logger("hospitality_staffing.staffing_plan")
    logger.info("Using band %s for revenue %s", band.name, revenue)
"""

from __future__ import annotations

import logging
import time

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

_state: dict[str, int] = {"level": logging.INFO}
_managed: set[str] = set()


def get_logger(name: str) -> logging.Logger:
    """Return a standard logger configured for UTC timestamps.

    Args:
        name: Logger name (use a stable module-qualified name).

    Returns:
        A logger with a single stream handler and a consistent UTC format.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT)
        formatter.converter = time.gmtime
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(_state["level"])
        logger.propagate = False
        _managed.add(name)
    return logger


def set_log_level(level: str | int) -> None:
    """Apply ``level`` to every logger created by ``get_logger``, now and later."""
    resolved = logging.getLevelName(level.upper()) if isinstance(level, str) else level
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    _state["level"] = resolved
    for name in _managed:
        logging.getLogger(name).setLevel(resolved)
