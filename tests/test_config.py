"""
EventStore Configuration Tests
"""

import logging

import pytest

from eventstore.config import (
    DEFAULT_LOG_FORMAT,
    configure_logging,
    get_config,
    load_config,
    reset_config,
)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    for name in ("EVENTSTORE_LOG_LEVEL", "EVENTSTORE_LOG_FORMAT", "EVENTSTORE_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


class TestConfig:
    """Test environment-driven configuration."""

    def test_defaults(self):
        config = load_config()
        assert config.debug is False
        assert config.log_level == "INFO"
        assert config.logging.format == DEFAULT_LOG_FORMAT

    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("EVENTSTORE_LOG_LEVEL", "warning")
        assert load_config().log_level == "WARNING"

    def test_invalid_log_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("EVENTSTORE_LOG_LEVEL", "chatty")
        assert load_config().log_level == "INFO"

    def test_debug_forces_debug_level(self, monkeypatch):
        monkeypatch.setenv("EVENTSTORE_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("EVENTSTORE_DEBUG", "yes")
        config = load_config()
        assert config.debug is True
        assert config.log_level == "DEBUG"

    def test_get_config_is_cached(self, monkeypatch):
        first = get_config()
        monkeypatch.setenv("EVENTSTORE_DEBUG", "1")
        assert get_config() is first

        reset_config()
        assert get_config().debug is True

    def test_configure_logging(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        monkeypatch.setenv("EVENTSTORE_DEBUG", "true")

        configure_logging()

        assert calls == [{"level": "DEBUG", "format": DEFAULT_LOG_FORMAT}]


class TestStoreLogging:
    """Store operations emit DEBUG records."""

    def test_subscribe_and_notify_logged(self, caplog):
        from eventstore import EventStore

        store = EventStore(name="logged")
        with caplog.at_level(logging.DEBUG, logger="eventstore.state.state_store"):
            cancel = store.subscribe(lambda previous, current: None)
            store.update({"a": 1})
            cancel()

        messages = [r.getMessage() for r in caplog.records]
        assert any("Subscribed observer on logged" in m for m in messages)
        assert any("Notifying 1 observer(s) on logged" in m for m in messages)
        assert any("Removed observer from logged" in m for m in messages)
