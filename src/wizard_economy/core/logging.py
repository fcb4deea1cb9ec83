"""Structured logging for the wizard economy.

Models log through structlog: debug events for things that silently did
not happen (a blocked spell, refused mana, an item lost in transit) and
info events for completed trades, thefts and loots. Output is a colored
console stream during development and one JSON object per line when
``json_format`` is set.

Example:
    >>> from wizard_economy.core.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG")
    >>> get_logger(__name__).info("Item purchased", item="Potion", price=1)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger


DEFAULT_APP_NAME = "wizard_economy"


def app_context(app_name: str) -> Processor:
    """Build a processor tagging every event with ``app_name``.

    Args:
        app_name: Value of the ``app`` key.

    Returns:
        A structlog processor.
    """

    def add_app_context(
        logger: WrappedLogger,
        method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        event_dict["app"] = app_name
        return event_dict

    return add_app_context


def _build_processors(json_format: bool, app_name: str) -> list[Processor]:
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        app_context(app_name),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_format:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(exception_formatter=structlog.dev.plain_traceback)
        )
    return processors


def configure_logging(
    *,
    level: str = "INFO",
    json_format: bool = False,
    app_name: str = DEFAULT_APP_NAME,
) -> None:
    """Configure structlog for the whole process.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Unknown names fall back to INFO.
        json_format: Render JSON lines instead of console output.
        app_name: Application name attached to every event.
    """
    threshold = logging.getLevelName(level.upper())
    if not isinstance(threshold, int):
        threshold = logging.INFO

    structlog.configure(
        processors=_build_processors(json_format, app_name),
        wrapper_class=structlog.make_filtering_bound_logger(threshold),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_from_settings() -> None:
    """Configure logging from the cached application settings.

    ``debug`` forces the DEBUG level; ``app_name`` tags every event.
    """
    from wizard_economy.core.config import get_settings

    settings = get_settings()
    configure_logging(
        level=settings.effective_log_level,
        json_format=settings.json_logs,
        app_name=settings.app_name,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a logger, typically ``get_logger(__name__)`` at module level."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Attach key-value pairs to every following event in this context.

    Example:
        >>> bind_context(round=3, market="Diagon Alley")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Drop everything attached with bind_context."""
    structlog.contextvars.clear_contextvars()


__all__ = [
    "app_context",
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "bind_context",
    "clear_context",
]
