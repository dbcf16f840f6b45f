# Copyright 2025 Google LLC
# SPDX-License-Identifier: Apache-2.0

"""Typed structlog logging for the telemetry tools.

`get_logger()` returns a structlog logger typed through the `Logger`
protocol, and `configure_logging()` routes all events to stderr so that
stdout stays reserved for the MCP stdio transport.

Usage:
    from gcp_telemetry.core.logging import get_logger

    logger = get_logger(__name__)
    logger.info('Listed log entries', count=12)
"""

from __future__ import annotations

import logging
import sys
from typing import Protocol

import structlog


class Logger(Protocol):
    """Protocol for the subset of structlog's BoundLogger used in this package."""

    def debug(self, event: str | None = None, **kw: object) -> None:
        """Log a debug message."""
        ...

    def info(self, event: str | None = None, **kw: object) -> None:
        """Log an info message."""
        ...

    def warning(self, event: str | None = None, **kw: object) -> None:
        """Log a warning message."""
        ...

    def error(self, event: str | None = None, **kw: object) -> None:
        """Log an error message."""
        ...

    def exception(self, event: str | None = None, **kw: object) -> None:
        """Log an exception with traceback."""
        ...

    def bind(self, **new_values: object) -> Logger:
        """Return a new logger with bound context values."""
        ...


def get_logger(name: str | None = None) -> Logger:
    """Get a typed logger instance.

    Args:
        name: Optional logger name (typically __name__).

    Returns:
        A typed logger instance.
    """
    return structlog.get_logger(name)


def configure_logging(level: str = 'INFO') -> None:
    """Configure structlog to render to stderr.

    Should be called once at startup, before the server starts reading
    from stdin.

    Args:
        level: Name of the minimum level to emit (e.g. 'DEBUG', 'INFO').
            Unknown names fall back to INFO.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(
        format='%(message)s',
        stream=sys.stderr,
        level=numeric_level,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt='iso'),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
