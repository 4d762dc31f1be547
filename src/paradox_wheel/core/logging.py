"""Structured logging for The Paradox Wheel.

Logging is configured once per process from ``Settings``. In debug mode the
output is coloured console lines; otherwise it is one JSON object per line.
Rule enums (phases, spheres, rejection reasons) are logged as their plain
values, so a rejected allocation reads ``reason=budget_exceeded``.

Example:
    >>> from paradox_wheel.core.logging import configure_logging, get_logger
    >>> configure_logging()
    >>> logger = get_logger(__name__)
    >>> logger.info("Rote created", rote="Dream Walk", sphere=Sphere.SPIRIT)
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor

from paradox_wheel.core.config import Settings, get_settings


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger


# Third-party loggers that drown out ours below WARNING
QUIET_LOGGERS = ("httpx", "uvicorn.access", "watchdog", "streamlit")

_configured = False


def _add_app(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict.setdefault("app", "paradox_wheel")
    return event_dict


def _enum_values(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Replace enum members with their values."""
    for key, value in event_dict.items():
        if isinstance(value, Enum):
            event_dict[key] = value.value
    return event_dict


def configure_logging(settings: Settings | None = None, *, force: bool = False) -> None:
    """Configure structlog and the standard library root logger.

    Streamlit re-executes page scripts on every interaction, so repeated
    calls are ignored unless ``force`` is set.

    Args:
        settings: Source of ``log_level`` and ``debug``. Defaults to
            ``get_settings()``.
        force: Reconfigure even if logging is already set up.
    """
    global _configured
    if _configured and not force:
        return

    settings = settings or get_settings()
    level = getattr(logging, settings.log_level)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        _add_app,
        _enum_values,
    ]
    if settings.debug:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        level=level,
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    _configured = True


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a logger, typically with ``__name__``."""
    return structlog.get_logger(name)


@contextmanager
def log_context(**values: Any) -> Iterator[None]:
    """Bind values to every log line emitted inside the block.

    Used by the API to tag each request's logs with a request id. Values
    bound before the block are restored afterwards.

    Example:
        >>> with log_context(request_id="abc", path="/api/rotes"):
        ...     logger.info("Listing rotes")
    """
    with structlog.contextvars.bound_contextvars(**values):
        yield


__all__ = [
    "configure_logging",
    "get_logger",
    "log_context",
]
