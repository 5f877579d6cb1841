"""Logging configuration for the cart pricing engine."""

import logging
import os
import sys

import structlog

DEFAULT_LOG_LEVEL = "WARNING"


def get_log_level(level: str | None = None) -> int:
    """Resolve a log level name to its numeric value.

    Environment variables:
        LOG_LEVEL: Level name used when ``level`` is not given
            (default: WARNING).

    Unrecognised names fall back to the default level.
    """
    name = (level or os.environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    value = logging.getLevelName(name)
    if not isinstance(value, int):
        return logging.getLevelName(DEFAULT_LOG_LEVEL)
    return value


def configure_logging(level: str | None = None) -> None:
    """Configure structlog with JSON rendering and ISO timestamps."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(get_log_level(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
