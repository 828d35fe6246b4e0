"""Structured logging configuration."""
import logging
from typing import Any

import structlog


def configure_logging(level: str = "INFO", environment: str = "local") -> None:
    """Configure structured logging.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ...)
        environment: APP_ENV; "local" gets the console renderer, anything else JSON
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.format_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if environment == "local" else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper(), logging.INFO)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Get a logger instance.

    Args:
        name: Logger name (usually __name__)
    """
    return structlog.get_logger(name)
