"""Unit tests for the greeting value objects and pure helpers."""

from __future__ import annotations

import dataclasses

import pytest

from console_greeter.domain.errors import InvalidAge
from console_greeter.domain.greeting import DEFAULT_PROMPTS, Greeting, Prompts, compose_greeting, parse_age


def test_default_prompts_text() -> None:
    assert DEFAULT_PROMPTS.name == "Enter your name: "
    assert DEFAULT_PROMPTS.age == "Enter your age: "


def test_compose_greeting_exact_line() -> None:
    assert compose_greeting(Greeting(name="Alice", age=30)) == "Hello, Alice! You are 30 years old.\n"


def test_compose_greeting_keeps_internal_spaces() -> None:
    line = compose_greeting(Greeting(name="Mary  Jane", age=41))
    assert line == "Hello, Mary  Jane! You are 41 years old.\n"


def test_compose_greeting_with_custom_template() -> None:
    prompts = Prompts(template="{name}/{age}\n")
    assert compose_greeting(Greeting(name="Bob", age=25), prompts) == "Bob/25\n"


def test_greeting_is_immutable() -> None:
    greeting = Greeting(name="Bob", age=25)
    with pytest.raises(dataclasses.FrozenInstanceError):
        greeting.name = "Ann"  # type: ignore[misc]


@pytest.mark.parametrize(
    ("token", "expected"),
    [("30", 30), ("0", 0), ("+7", 7), ("-3", -3), ("007", 7)],
)
def test_parse_age_accepts_integers(token: str, expected: int) -> None:
    assert parse_age(token) == expected


@pytest.mark.parametrize("token", ["thirty", "2.5", "25abc", "0x1f", "", "1_000", "٣٠", "２５", "+", "- 3"])
def test_parse_age_rejects_non_integers(token: str) -> None:
    with pytest.raises(InvalidAge) as excinfo:
        parse_age(token)
    assert excinfo.value.token == token
