"""Logging helpers using structlog."""

from __future__ import annotations

import logging
import sys

import structlog


def get_logger(name: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """Return a configured structlog logger, configuring the stack on first use."""

    if not structlog.is_configured():
        configure_logging()

    return structlog.get_logger(name)


def configure_logging(level: str = "INFO", *, json_logs: bool = True) -> None:
    """Configure structlog and stdlib logging.

    ``json_logs=False`` swaps the JSON renderer for structlog's console renderer,
    which is easier to read when running the CLI by hand. Loggers are not
    cached on first use, so calling this again (the CLI does, and so do tests)
    takes effect for loggers bound afterwards.
    """

    renderer: structlog.typing.Processor = (
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper(), logging.INFO)),
        logger_factory=structlog.PrintLoggerFactory(sys.stdout),
        cache_logger_on_first_use=False,
    )

    # httpx logs every request at INFO through the stdlib logger.
    logging.basicConfig(level=level.upper(), format="%(message)s", stream=sys.stdout)
    logging.getLogger("httpx").setLevel(logging.WARNING)
