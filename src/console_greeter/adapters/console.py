"""Text stream adapters for interactive console sessions.

Purpose
-------
Wrap raw text streams (``sys.stdin``/``sys.stdout`` or in-memory buffers) so
the session routine reads whole lines and single tokens, and so prompts are
flushed before input is consumed.

Key behaviours
--------------
* :meth:`ConsoleReader.read_line` keeps internal whitespace and drops only the
  trailing newline.
* :meth:`ConsoleReader.read_token` skips leading whitespace across lines and
  leaves the delimiter that ends the token unread. Only ASCII whitespace
  delimits a token.
* Both readers raise :class:`~console_greeter.domain.errors.MissingInput` on an
  exhausted stream.
"""

from __future__ import annotations

from typing import Final, TextIO

from ..domain.errors import MissingInput
from ..observability import log_debug

WHITESPACE: Final[str] = " \t\n\v\f\r"
"""Token delimiters. Unicode separators such as NBSP belong to the token."""


class ConsoleReader:
    """Read lines and tokens from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def read_line(self) -> str:
        """Return the next line without its trailing newline.

        A last line lacking a newline is returned unchanged. End of stream
        raises :class:`MissingInput`.

        Examples
        --------
        >>> import io
        >>> ConsoleReader(io.StringIO('Mary Jane\\n25\\n')).read_line()
        'Mary Jane'
        """

        if self._pending == "\n":
            self._pending = ""
            line = "\n"
        else:
            line = self._pending + self._stream.readline()
            self._pending = ""
        if not line:
            raise MissingInput("a line")
        if line.endswith("\n"):
            line = line[:-1]
        log_debug("line-read", length=len(line))
        return line

    def read_token(self) -> str:
        """Return the next run of characters outside :data:`WHITESPACE`.

        Examples
        --------
        >>> import io
        >>> reader = ConsoleReader(io.StringIO('\\n  42 rest\\n'))
        >>> reader.read_token()
        '42'
        >>> reader.read_line()
        ' rest'
        """

        char = self._read_char()
        while char and char in WHITESPACE:
            char = self._read_char()
        if not char:
            raise MissingInput("a token")

        chars = []
        while char and char not in WHITESPACE:
            chars.append(char)
            char = self._read_char()
        self._pending = char
        token = "".join(chars)
        log_debug("token-read", length=len(token))
        return token

    def _read_char(self) -> str:
        if self._pending:
            char, self._pending = self._pending, ""
            return char
        return self._stream.read(1)


class ConsoleWriter:
    """Write prompts and output to a text stream, flushing after each write."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def prompt(self, text: str) -> None:
        self._write(text)

    def emit(self, text: str) -> None:
        self._write(text)

    def _write(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()
