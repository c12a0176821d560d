"""
Tests for environment settings and logging setup.
"""

import logging

import pytest
from pythonjsonlogger.json import JsonFormatter

from stellar_id.config import Settings
from stellar_id.logging_config import TraceIDFilter, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_settings_defaults(monkeypatch):
    for key in ("STELLAR_ID_CACHE_CAPACITY", "STELLAR_ID_LOG_LEVEL", "STELLAR_ID_LOG_FORMAT"):
        monkeypatch.delenv(key, raising=False)

    settings = Settings.from_env()
    assert settings == Settings(cache_capacity=1000, log_level="INFO", log_format="text")


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("STELLAR_ID_CACHE_CAPACITY", "25")
    monkeypatch.setenv("STELLAR_ID_LOG_LEVEL", "debug")
    monkeypatch.setenv("STELLAR_ID_LOG_FORMAT", "JSON")

    settings = Settings.from_env()
    assert settings.cache_capacity == 25
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "json"


def test_invalid_capacity_falls_back(monkeypatch):
    for bad in ("abc", "0", "-5"):
        monkeypatch.setenv("STELLAR_ID_CACHE_CAPACITY", bad)
        assert Settings.from_env().cache_capacity == 1000


def test_setup_logging_json():
    setup_logging(Settings(log_level="WARNING", log_format="json"))
    root = logging.getLogger()

    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    handler = root.handlers[0]
    assert isinstance(handler.formatter, JsonFormatter)
    assert type(handler.formatter).__module__ == "pythonjsonlogger.json"
    assert any(isinstance(f, TraceIDFilter) for f in handler.filters)


def test_setup_logging_text_replaces_handlers():
    setup_logging(Settings(log_format="text"))
    setup_logging(Settings(log_format="text"))
    root = logging.getLogger()

    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0].formatter, JsonFormatter)


def test_trace_id_filter_sets_default():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    assert TraceIDFilter().filter(record)
    assert record.trace_id == "N/A"


def test_get_logger_carries_trace_id():
    adapter = get_logger("stellar_id.test", trace_id="batch-1")
    assert adapter.extra == {"trace_id": "batch-1"}
    assert get_logger("stellar_id.test").extra == {"trace_id": "N/A"}
