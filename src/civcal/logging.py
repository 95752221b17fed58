"""Logging configuration for civcal."""

from __future__ import annotations

import logging

import structlog


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger."""
    return structlog.get_logger(name)


def configure_logging(
    level: str = "WARNING",
    json_output: bool = False,
) -> None:
    """Configure civcal logging.

    Args:
        level: Log level ("DEBUG", "INFO", "WARNING", "ERROR")
        json_output: True for JSON output, False for console
    """
    logging.basicConfig(format="%(message)s", level=getattr(logging, level.upper()))

    shared_processors = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        processors = shared_processors + [structlog.processors.JSONRenderer()]
    else:
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=False)]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

