"""
Structured logging setup.
"""

import logging
import sys

import structlog

from product_codes.config import Settings, get_settings

# Set by configure_logging
_log_classifications = False


def classification_logging_enabled() -> bool:
    """Check if a debug event should be emitted per classified code."""
    return _log_classifications


def configure_logging(settings: Settings | None = None) -> None:
    """
    Configure structlog from settings.

    Args:
        settings: Settings to use (default: cached environment settings)
    """
    global _log_classifications

    settings = settings or get_settings()
    _log_classifications = settings.log_classifications

    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
