"""Public package surface for ``console_greeter``.

``import console_greeter`` and ``python -m console_greeter`` reach the same
session routine; the rest of the package is adapters and wiring.
"""

from __future__ import annotations

from .core import greet, run_session
from .domain.errors import GreeterError, InvalidAge, MissingInput
from .domain.greeting import DEFAULT_PROMPTS, Greeting, Prompts, compose_greeting, parse_age
from .observability import bind_trace_id, get_logger

__all__ = [
    "DEFAULT_PROMPTS",
    "GreeterError",
    "Greeting",
    "InvalidAge",
    "MissingInput",
    "Prompts",
    "bind_trace_id",
    "compose_greeting",
    "get_logger",
    "greet",
    "parse_age",
    "run_session",
]
