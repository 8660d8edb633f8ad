"""Structured logging for klaw-guard.

Uses structlog's ProcessorFormatter to unify structlog and stdlib logging output.
The library stays silent until logging is configured, either directly through
configure_logging() or through init(log_level=...).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

__all__ = [
    'configure_logging',
    'get_logger',
    'is_enabled',
    'reset_logging',
    'trace',
]

_LOGGER_NAME = 'klaw_guard'

_enabled = False


def _get_shared_processors() -> list[Any]:
    """Get processors shared between structlog and stdlib foreign logs."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
    ]


def _get_structlog_processors() -> list[Any]:
    """Get the full processor chain for structlog loggers."""
    return [
        *_get_shared_processors(),
        structlog.stdlib.PositionalArgumentsFormatter(),
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
    """Configure structlog with ProcessorFormatter and enable guard tracing.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use colored console output.
    """
    global _enabled  # noqa: PLW0603

    structlog.configure(
        processors=_get_structlog_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_get_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    logger = logging.getLogger(_LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False

    _enabled = True


def reset_logging() -> None:
    """Restore structlog defaults and silence guard tracing."""
    global _enabled  # noqa: PLW0603

    structlog.reset_defaults()
    logging.getLogger(_LOGGER_NAME).handlers.clear()
    _enabled = False


def is_enabled() -> bool:
    """Return True once logging has been configured."""
    return _enabled


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger.

    Args:
        name: Logger name. Defaults to the package logger.

    Returns:
        A structlog BoundLogger.
    """
    return structlog.get_logger(name or _LOGGER_NAME)


def trace(event: str, **fields: Any) -> None:
    """Emit a debug event from the library, if logging is configured."""
    if not _enabled:
        return
    get_logger().debug(event, **fields)
