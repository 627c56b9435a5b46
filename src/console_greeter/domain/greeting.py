"""Greeting value objects and the pure functions that shape them.

Purpose
-------
Hold the two values a session collects and the fixed texts it prints, keeping
all formatting free of I/O so it can be tested without streams.

Contents
--------
* :class:`Prompts` – immutable prompt and template configuration.
* :data:`DEFAULT_PROMPTS` – the texts the console routine uses.
* :class:`Greeting` – the name/age pair gathered from one session.
* :func:`parse_age` – integer parsing for the age token.
* :func:`compose_greeting` – renders the final greeting line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from .errors import InvalidAge


@dataclass(frozen=True, slots=True)
class Prompts:
    """Texts written to standard output during a session.

    ``template`` receives ``name`` and ``age`` keyword fields and carries its
    own trailing newline; the two prompts carry none.
    """

    name: str = "Enter your name: "
    age: str = "Enter your age: "
    template: str = "Hello, {name}! You are {age} years old.\n"


DEFAULT_PROMPTS: Final[Prompts] = Prompts()

_AGE_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True, slots=True)
class Greeting:
    """Name and age collected from one session."""

    name: str
    age: int


def parse_age(token: str) -> int:
    """Return *token* as an integer or raise :class:`InvalidAge`.

    Examples
    --------
    >>> parse_age('30')
    30
    >>> parse_age('+7')
    7
    >>> parse_age('1_000')
    Traceback (most recent call last):
    ...
    console_greeter.domain.errors.InvalidAge: age must be a whole number, got '1_000'
    >>> parse_age('thirty')
    Traceback (most recent call last):
    ...
    console_greeter.domain.errors.InvalidAge: age must be a whole number, got 'thirty'
    """

    # ASCII digits only, no digit separators.
    if _AGE_PATTERN.fullmatch(token) is None:
        raise InvalidAge(token)
    return int(token, 10)


def compose_greeting(greeting: Greeting, prompts: Prompts = DEFAULT_PROMPTS) -> str:
    """Render the greeting line for *greeting*.

    Examples
    --------
    >>> compose_greeting(Greeting(name='Ann Lee', age=5))
    'Hello, Ann Lee! You are 5 years old.\\n'
    """

    return prompts.template.format(name=greeting.name, age=greeting.age)
