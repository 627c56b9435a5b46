"""Application-layer ports describing the console adapters.

Purpose
-------
Define the structural contracts the session routine talks to so it never
depends on concrete streams.

Contents
--------
* :class:`LineReader` – pulls a line or a whitespace-delimited token.
* :class:`TextWriter` – writes prompts and the final greeting.

System Role
-----------
:class:`console_greeter.adapters.console.ConsoleReader` and
:class:`console_greeter.adapters.console.ConsoleWriter` implement these; tests
may pass any object with the same methods.
"""

from __future__ import annotations

from typing import Protocol


class LineReader(Protocol):
    """Read values from an interactive text source."""

    def read_line(self) -> str:
        """Return the next line without its newline or raise ``MissingInput``."""

    def read_token(self) -> str:
        """Return the next whitespace-delimited token or raise ``MissingInput``."""


class TextWriter(Protocol):
    """Write text to an interactive sink.

    Why
    ----
    Prompts must be visible before the following read blocks, so the port
    separates prompt writes from regular output.
    """

    def prompt(self, text: str) -> None:
        """Write *text* without a newline and make it visible immediately."""

    def emit(self, text: str) -> None:
        """Write *text* as-is."""
