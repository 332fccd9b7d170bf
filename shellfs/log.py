"""Structured logging for shellfs using structlog."""

from __future__ import annotations

import logging
import os
import sys

import structlog

logger: structlog.typing.FilteringBoundLogger = structlog.get_logger("shellfs")


def setup_logging() -> structlog.typing.FilteringBoundLogger:
    """Configure structlog with console output.

    shellfs never calls this itself; applications that want the default
    console rendering call it once at startup.
    """
    log_level = os.environ.get("SHELLFS_LOG_LEVEL", "INFO").upper()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level, logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger("shellfs")


def log_command(line: str) -> None:
    """Emit the shell equivalent of an operation, e.g. ``rm -rf build``."""
    logger.info(line)
