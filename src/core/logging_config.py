"""Structured logging configuration.

This module initializes structlog with a stable JSON format on stderr.
Stdout is reserved for generated SQL.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from core.constants import DEFAULT_LOG_LEVEL

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Falls back to the default level when nothing configured logging yet,
    so library callers never get events on stdout.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    if not structlog.is_configured():
        configure_logging(DEFAULT_LOG_LEVEL)
    return structlog.get_logger(name)


def configure_logging(log_level: str) -> None:
    """Configure structlog processors and level filtering.

    Args:
        log_level: Supported level name, e.g. ``warning``.
    """
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_LEVELS[log_level]),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
