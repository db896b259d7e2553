"""
Structured logging for outcomes.

The containers themselves never write anything the host did not ask for.
Library modules obtain a logger through :func:`get_logger`, which routes every
event through the standard library logger of the same name, so records stay
silent until the host raises that logger's level or calls
:func:`configure_logging`.

Architecture:
    ::

        get_logger(__name__)
            │
            ▼
        structlog BoundLogger ──processors──> logging.getLogger(__name__)
                                                  │
                                 configure_logging(level, json_format, service)
                                   1. TimeStamper (iso)
                                   2. add_log_level / add_logger_name
                                   3. service.name
                                   4. ECS field names (JSON only)
                                   5. JSONRenderer or ConsoleRenderer

Examples:
    >>> from outcomes.core.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG", json_format=True, service="billing")
    >>> logger = get_logger(__name__)
    >>> logger.debug("supplier_failed", error="boom")

Tags:
    logging, structlog, observability, outcomes-core
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

PACKAGE_LOGGER = "outcomes"

# structlog key -> ECS field name
_ECS_FIELDS = {
    "timestamp": "@timestamp",
    "level": "log.level",
    "logger": "log.logger",
}


class _ServiceName:
    """Stamp ``service.name`` on every event unless the caller set one."""

    def __init__(self, service: str):
        self.service = service

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service.name", self.service)
        return event_dict


def _ecs_fields(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    for key, ecs_key in _ECS_FIELDS.items():
        if key in event_dict:
            event_dict[ecs_key] = event_dict.pop(key)
    return event_dict


def _processors(service: str, json_format: bool, add_timestamp: bool) -> list[Processor]:
    chain: list[Processor] = []
    if add_timestamp:
        chain.append(structlog.processors.TimeStamper(fmt="iso"))
    chain += [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        _ServiceName(service),
    ]
    if json_format:
        chain += [_ecs_fields, structlog.processors.JSONRenderer()]
    else:
        chain.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))
    return chain


def configure_logging(
    level: str = "INFO",
    json_format: bool | None = None,
    service: str = PACKAGE_LOGGER,
    add_timestamp: bool = True,
) -> None:
    """Route structlog through stdlib logging for the host application.

    Captured errors are only ever logged at DEBUG, so ``level="DEBUG"`` is
    what makes them visible.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: True for JSON, False for console, None for auto (JSON if not tty)
        service: Value of the ``service.name`` field
        add_timestamp: Include ISO timestamp in logs
    """
    if json_format is None:
        json_format = not sys.stdout.isatty()

    structlog.configure(
        processors=_processors(service, json_format, add_timestamp),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=numeric_level)
    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger backed by the stdlib logger ``name``.

    Level filtering is left to the stdlib logger, so an unconfigured host
    sees nothing below WARNING.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


__all__ = [
    "PACKAGE_LOGGER",
    "configure_logging",
    "get_logger",
]
