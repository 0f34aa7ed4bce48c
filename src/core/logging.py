"""Structured logging configuration."""

import logging
import sys

import structlog

from src.core.config import Settings, settings as app_settings


def setup_logging(settings: Settings = app_settings) -> None:
    """
    Configure structlog and the standard library root logger.

    Log events are rendered as JSON lines unless log_format is "console".
    """
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
        force=True,
    )

    if settings.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    structlog.get_logger(__name__).debug(
        "logging_configured",
        level=settings.log_level,
        format=settings.log_format,
    )
