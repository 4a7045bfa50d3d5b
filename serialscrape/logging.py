"""Centralised logging helpers for serialscrape."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from .config import SerialSettings, get_settings

_ROOT_LOGGER = "serialscrape"
_LOGGER_CACHE: Dict[str, logging.Logger] = {}

logging.getLogger(_ROOT_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str = _ROOT_LOGGER) -> logging.Logger:
    """Return a cached :class:`logging.Logger` instance."""

    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = logging.getLogger(name)
    return _LOGGER_CACHE[name]


def configure_logging(settings: Optional[SerialSettings] = None) -> logging.Logger:
    """Apply ``settings.log_level`` to the package logger and return it."""

    settings = settings or get_settings()
    logger = get_logger(_ROOT_LOGGER)
    logger.setLevel(settings.log_level)
    return logger


def trace_enabled(logger: logging.Logger) -> bool:
    """True when trace records should be built and emitted on ``logger``."""

    return get_settings().trace and logger.isEnabledFor(logging.DEBUG)


__all__ = ["get_logger", "configure_logging", "trace_enabled"]
