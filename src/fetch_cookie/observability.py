"""Structured logging configuration."""

import logging
import sys
from typing import TextIO

import structlog

from fetch_cookie.settings import FetchCookieSettings


def configure_logging(
    level: int = logging.INFO,
    output: TextIO = sys.stderr,
    json_format: bool = True,
) -> None:
    """Configure structlog for fetch-cookie log events.

    Args:
        level: Logging level (default: INFO).
        output: Output stream (default: stderr).
        json_format: Whether to render JSON lines (default: True) or
            colored console output.
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=output,
        level=level,
    )


def configure_logging_from_settings(
    settings: FetchCookieSettings | None = None,
    output: TextIO = sys.stderr,
) -> None:
    """Configure logging from ``FETCH_COOKIE_LOG_LEVEL`` / ``FETCH_COOKIE_LOG_JSON``."""
    settings = settings or FetchCookieSettings()
    configure_logging(
        level=settings.log_level_number,
        output=output,
        json_format=settings.log_json,
    )
