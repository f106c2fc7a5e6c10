"""
Structured logging for the archive builder.

Every module obtains its logger with ``get_logger(__name__)`` and emits
snake_case events with keyword fields.  The writer binds ``archive`` and
``processor`` around each stage so that every event raised from inside a
processor carries the stage that produced it.

Architecture:
    ::

        configure_logging(level="INFO", json_format=None, service="omarchive")
              │
              ▼
        structlog processor chain:
          1. TimeStamper(fmt="iso", utc=True)
          2. merge_contextvars      (archive, processor from LogContext)
          3. add_log_level
          4. add_service_metadata (+ ECS field names when JSON)
          5. JSONRenderer  (not a TTY)  |  ConsoleRenderer (TTY)

Examples:
    >>> from omarchive.core.logging import configure_logging, get_logger, LogContext
    >>> configure_logging(level="DEBUG", json_format=False)
    >>> logger = get_logger(__name__)
    >>> with LogContext(archive="CoreContentPack", processor="templates"):
    ...     logger.info("processor_started", records=12)

Tags:
    logging, structlog, observability, omarchive
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog._config import BoundLoggerLazyProxy
from structlog.types import EventDict, Processor, WrappedLogger

_SERVICE_NAME = "omarchive"


def _add_service_metadata(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service-level metadata to all logs."""
    event_dict.setdefault("service.name", _SERVICE_NAME)
    return event_dict


def _ecs_field_names(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Rename timestamp, level and logger to their ECS field names."""
    for plain, ecs in (("timestamp", "@timestamp"), ("level", "log.level"), ("logger", "log.logger")):
        if plain in event_dict:
            event_dict[ecs] = event_dict.pop(plain)
    return event_dict


def level_number(level: str) -> int:
    """Numeric value of a level name such as ``"info"`` or ``"WARNING"``.

    Raises:
        ValueError: Not a standard logging level name
    """
    number = logging.getLevelNamesMapping().get(level.upper())
    if number is None:
        raise ValueError(f"Unknown log level '{level}'; use DEBUG, INFO, WARNING or ERROR")
    return number


def build_processors(json_format: bool, add_timestamp: bool = True) -> list[Processor]:
    """Processor chain for one output format, renderer last."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        _add_service_metadata,
    ]
    if add_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso", utc=True))

    if json_format:
        processors += [
            structlog.processors.format_exc_info,
            _ecs_field_names,
            structlog.processors.JSONRenderer(sort_keys=True),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))
    return processors


def configure_logging(
    level: str = "INFO",
    json_format: bool | None = None,
    service: str = "omarchive",
    add_timestamp: bool = True,
) -> None:
    """Configure structured logging for the builder.

    Events are printed to whatever ``sys.stdout`` is at emit time, so CLI
    runners and capture fixtures see them.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: True for JSON, False for console, None for auto (JSON if not tty)
        service: Service name to include in logs
        add_timestamp: Include ISO timestamp in logs

    Raises:
        ValueError: ``level`` is not a logging level name
    """
    global _SERVICE_NAME
    min_level = level_number(level)
    _SERVICE_NAME = service

    if json_format is None:
        json_format = not sys.stdout.isatty()

    structlog.configure(
        processors=build_processors(json_format, add_timestamp),
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger (usually ``get_logger(__name__)``).

    The name travels as the ``logger`` field of every event.
    """
    if name is None:
        return structlog.get_logger()
    return BoundLoggerLazyProxy(None, initial_values={"logger": name}, logger_factory_args=())


def bind_context(**kwargs: Any) -> None:
    """Bind context to include in all subsequent logs."""
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Remove specific keys from logging context."""
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """Clear all bound context."""
    structlog.contextvars.clear_contextvars()


class LogContext:
    """Context manager for scoped logging context.

    Example:
        with LogContext(archive="CoreContentPack", processor="connectors"):
            logger.info("processor_started")
        # Context cleared here
    """

    def __init__(self, **kwargs: Any):
        self._context = kwargs

    def __enter__(self) -> LogContext:
        bind_context(**self._context)
        return self

    def __exit__(self, *args) -> None:
        unbind_context(*self._context.keys())


__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "unbind_context",
    "clear_context",
    "LogContext",
]
