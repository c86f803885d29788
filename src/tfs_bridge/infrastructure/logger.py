"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import sys

import structlog

from tfs_bridge.infrastructure.config import get_setting


def setup_logging(level: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """Configure structlog to render key/value events on stderr.

    ``level`` defaults to LOG_LEVEL (environment or .env), then INFO.
    """
    level_name = (level or get_setting("LOG_LEVEL", "INFO")).upper()
    min_level = getattr(logging, level_name, logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger()


logger: structlog.typing.FilteringBoundLogger = setup_logging()


def install_exception_hooks() -> None:
    """Log uncaught exceptions as critical events instead of bare tracebacks."""

    def handle_exception(exc_type, exc_value, exc_traceback):  # type: ignore[no-untyped-def]
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        logger.critical("Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))

    sys.excepthook = handle_exception
