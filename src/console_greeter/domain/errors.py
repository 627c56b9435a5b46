"""Domain-level exception hierarchy.

Purpose
-------
Expose the small error taxonomy shared by the console adapters, the session
routine, and the CLI. The hierarchy lives in the domain layer so adapters can
raise it without depending on outer layers.

Contents
--------
* :class:`GreeterError` – umbrella base class for every failure of a session.
* :class:`MissingInput` – standard input ended before a value was available.
* :class:`InvalidAge` – the age token is not an integer.

System Role
-----------
Nothing inside the package catches these; the CLI converts them into an exit
code through ``lib_cli_exit_tools``.
"""

from __future__ import annotations


class GreeterError(Exception):
    """Base type for all exceptions emitted by ``console_greeter``."""


class MissingInput(GreeterError):
    """Raised when the input stream is exhausted before a required value.

    Typical Sources
    ---------------
    :meth:`console_greeter.adapters.console.ConsoleReader.read_line` when no name
    line exists and :meth:`~console_greeter.adapters.console.ConsoleReader.read_token`
    when only whitespace remains.
    """

    def __init__(self, what: str) -> None:
        super().__init__(f"input ended before {what} was read")
        self.what = what


class InvalidAge(GreeterError, ValueError):
    """Raised when the age token cannot be parsed as an integer.

    Subclasses :class:`ValueError` as well so callers treating it as a plain
    conversion failure keep working.
    """

    def __init__(self, token: str) -> None:
        super().__init__(f"age must be a whole number, got {token!r}")
        self.token = token
