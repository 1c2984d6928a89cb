"""Structured logging for adtkit.

adtkit only emits DEBUG events at decode boundaries. Loggers returned by
`get_logger()` are structlog wrappers around stdlib loggers under the
``adtkit`` namespace, so nothing is printed until the application enables
them: either through its own stdlib logging setup, or by calling
`configure_logging()` (or `adtkit.init()`).

`configure_logging()` attaches a structlog ProcessorFormatter to the
``adtkit`` logger only; the host application's root handlers are left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

__all__ = [
    'LOGGER_NAME',
    'configure_logging',
    'get_logger',
]

LOGGER_NAME = 'adtkit'


def _get_processors() -> list[Any]:
    """Get the processor chain for adtkit loggers."""
    return [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _get_renderer(json_output: bool = True) -> Any:
    """Get the appropriate renderer based on output format."""
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Route adtkit's log events to stderr through a structlog formatter.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use colored console output.
    """
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    lib_logger = logging.getLogger(LOGGER_NAME)
    lib_logger.handlers.clear()
    lib_logger.addHandler(handler)
    lib_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    lib_logger.propagate = False


def get_logger(name: str = LOGGER_NAME) -> Any:
    """Get a structlog logger backed by the stdlib logger `name`.

    Events below the stdlib logger's effective level are dropped before any
    processing, so an unconfigured application sees no output.

    Args:
        name: Stdlib logger name, normally the calling module's ``__name__``.

    Returns:
        A structlog BoundLogger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_get_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
