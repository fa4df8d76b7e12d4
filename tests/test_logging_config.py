"""Tests for logging setup."""

import json
import logging

from fpx_trace.logging_config import JSONFormatter, get_logger, setup_logging


def test_json_formatter_fields():
    """JSONFormatter emits one JSON object with the core fields."""
    record = logging.LogRecord(
        name="fpx_trace.collector.client",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=10,
        msg="GET %s",
        args=("http://localhost:8788/v1/traces",),
        exc_info=None,
    )
    data = json.loads(JSONFormatter().format(record))
    assert data["level"] == "DEBUG"
    assert data["logger"] == "fpx_trace.collector.client"
    assert data["message"] == "GET http://localhost:8788/v1/traces"
    assert data["line"] == 10
    assert "exception" not in data


def test_setup_logging_explicit_level():
    """An explicit level wins over the environment."""
    setup_logging("debug", json_output=True)
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert isinstance(root.handlers[0].formatter, JSONFormatter)


def test_setup_logging_env_level(monkeypatch):
    """FPX_TRACE_LOG_LEVEL is used when no level is passed."""
    monkeypatch.setenv("FPX_TRACE_LOG_LEVEL", "ERROR")
    setup_logging()
    assert logging.getLogger().level == logging.ERROR


def test_setup_logging_default_is_rich(monkeypatch):
    """The default handler is rich, writing to stderr, at WARNING."""
    from rich.logging import RichHandler

    monkeypatch.delenv("FPX_TRACE_LOG_LEVEL", raising=False)
    setup_logging()
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert isinstance(root.handlers[0], RichHandler)
    assert root.handlers[0].console.stderr is True


def test_get_logger():
    """get_logger returns the named stdlib logger."""
    assert get_logger("fpx_trace.test") is logging.getLogger("fpx_trace.test")
