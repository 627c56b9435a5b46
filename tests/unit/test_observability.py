"""Unit tests for the structured logging helpers in ``observability``."""

from __future__ import annotations

import io
import logging

import pytest

from console_greeter import bind_trace_id, get_logger, greet
from console_greeter.observability import TRACE_ID, log_error, log_info


def test_null_handler_present() -> None:
    """Package logger should always include a NullHandler so the library stays quiet."""

    logger = get_logger()
    assert any(isinstance(handler, logging.NullHandler) for handler in logger.handlers)


def test_trace_id_in_log(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="console_greeter")
    bind_trace_id("trace-123")
    try:
        log_info("greeting-emitted", age=30)
    finally:
        bind_trace_id(None)
    record = caplog.records[-1]
    assert record.levelno == logging.INFO
    assert getattr(record, "context") == {"trace_id": "trace-123", "age": 30}


def test_log_error_without_trace(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.ERROR, logger="console_greeter")
    log_error("age-invalid", token="x")
    record = caplog.records[-1]
    assert getattr(record, "context") == {"trace_id": None, "token": "x"}


def test_bind_trace_id_clears_context() -> None:
    bind_trace_id("trace-temp")
    bind_trace_id(None)
    assert TRACE_ID.get() is None


def test_session_emits_documented_events_in_order(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="console_greeter")
    bind_trace_id("session-1")
    try:
        greet(io.StringIO("Bob\n25\n"), io.StringIO())
    finally:
        bind_trace_id(None)
    records = [record for record in caplog.records if record.name == "console_greeter"]
    messages = [record.getMessage() for record in records]
    assert messages == ["session-start", "line-read", "name-read", "token-read", "age-read", "greeting-emitted"]
    assert all(getattr(record, "context")["trace_id"] == "session-1" for record in records)
