"""Composition root for ``console_greeter``.

Purpose
-------
Run the console interaction routine: prompt for a name, read one line, prompt
for an age, read one token, print the greeting. Every step blocks until it
completes and runs strictly in that order.

Contents
--------
* :func:`run_session` – the routine itself, written against the ports.
* :func:`greet` – convenience wrapper that adapts raw text streams.

System Role
-----------
The CLI calls :func:`greet` with ``sys.stdin``/``sys.stdout``. Errors raised by
the adapters or :func:`~console_greeter.domain.greeting.parse_age` propagate
unchanged.
"""

from __future__ import annotations

from typing import TextIO

from .adapters.console import ConsoleReader, ConsoleWriter
from .application.ports import LineReader, TextWriter
from .domain.errors import InvalidAge
from .domain.greeting import DEFAULT_PROMPTS, Greeting, Prompts, compose_greeting, parse_age
from .observability import log_debug, log_error, log_info


def run_session(
    reader: LineReader,
    writer: TextWriter,
    *,
    prompts: Prompts = DEFAULT_PROMPTS,
) -> Greeting:
    """Perform one prompt/read/print session and return what was greeted.

    Why
    ----
    Keeps the ordering guarantee (each prompt is written before its input is
    read) in one place, independent of the concrete streams.

    Parameters
    ----------
    reader:
        Source of the name line and the age token.
    writer:
        Sink for both prompts and the greeting.
    prompts:
        Texts to print. Defaults to :data:`DEFAULT_PROMPTS`.

    Returns
    -------
    Greeting
        The name and age that were printed.

    Raises
    ------
    MissingInput
        Input ended before the name line or the age token.
    InvalidAge
        The age token is not an integer; no greeting is printed.

    Examples
    --------
    >>> import io
    >>> out = io.StringIO()
    >>> run_session(ConsoleReader(io.StringIO('Bob\\n25\\n')), ConsoleWriter(out))
    Greeting(name='Bob', age=25)
    >>> out.getvalue()
    'Enter your name: Enter your age: Hello, Bob! You are 25 years old.\\n'
    """

    log_debug("session-start")
    writer.prompt(prompts.name)
    name = reader.read_line()
    log_debug("name-read", length=len(name))

    writer.prompt(prompts.age)
    token = reader.read_token()
    try:
        age = parse_age(token)
    except InvalidAge:
        log_error("age-invalid", token=token)
        raise
    log_debug("age-read", age=age)

    greeting = Greeting(name=name, age=age)
    writer.emit(compose_greeting(greeting, prompts))
    log_info("greeting-emitted", age=age)
    return greeting


def greet(stdin: TextIO, stdout: TextIO, *, prompts: Prompts = DEFAULT_PROMPTS) -> Greeting:
    """Run :func:`run_session` on raw text streams."""

    return run_session(ConsoleReader(stdin), ConsoleWriter(stdout), prompts=prompts)
