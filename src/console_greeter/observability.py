"""Structured session events for ``console_greeter``.

Events
    - ``session-start`` (debug): before the name prompt is written.
    - ``line-read`` / ``token-read`` (debug): emitted by the console reader with
      the ``length`` of what was read; the text itself is never logged.
    - ``name-read`` (debug) and ``age-read`` (debug, with ``age``).
    - ``greeting-emitted`` (info, with ``age``): after the greeting is flushed.
    - ``age-invalid`` (error, with ``token``): before :class:`InvalidAge`
      propagates.

Every record goes through the ``console_greeter`` logger, carries a
``context`` extra with the bound ``trace_id``, and never reaches standard
output. The logger has only a :class:`logging.NullHandler` until the host
application attaches its own.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Final, Mapping

TRACE_ID: ContextVar[str | None] = ContextVar("console_greeter_trace_id", default=None)
"""Identifier correlating the events of one session, ``None`` when unbound."""

_LOGGER: Final[logging.Logger] = logging.getLogger("console_greeter")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Return the ``console_greeter`` logger for handler configuration."""

    return _LOGGER


def bind_trace_id(trace_id: str | None) -> None:
    """Bind or clear the active trace identifier.

    Examples
    --------
    >>> bind_trace_id('abc123')
    >>> TRACE_ID.get()
    'abc123'
    >>> bind_trace_id(None)
    >>> TRACE_ID.get() is None
    True
    """

    TRACE_ID.set(trace_id)


def log_debug(message: str, **fields: Any) -> None:
    """Record a step of the session; silent unless a handler enables DEBUG."""

    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    """Record a completed session."""

    _emit(logging.INFO, message, fields)


def log_error(message: str, **fields: Any) -> None:
    """Record input that ends the session with an error."""

    _emit(logging.ERROR, message, fields)


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    # Fields travel in one extra so they never clash with LogRecord attributes.
    _LOGGER.log(level, message, extra={"context": _with_trace(fields)})


def _with_trace(fields: Mapping[str, Any]) -> dict[str, Any]:
    context = {"trace_id": TRACE_ID.get()}
    context.update(fields)
    return context
