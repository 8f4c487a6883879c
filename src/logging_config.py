"""structlog setup for the lookup service."""

import logging
import sys

import structlog

from config import settings


def configure_logging() -> None:
    """
    Configure structlog and the standard logging module.

    JSON lines when LOG_FORMAT is "json", colored console output otherwise.
    Safe to call more than once.
    """
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # uvicorn / fastapi use the standard library
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
