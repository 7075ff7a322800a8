"""Tests for settings and logging setup."""

import logging
from unittest.mock import patch

import structlog

from podfeed.config import FetchSettings, Settings
from podfeed.logging import setup_logging


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PODFEED_LOG_LEVEL", raising=False)
        settings = Settings()
        assert settings.log_level == "INFO"
        assert settings.json_logs is False
        assert settings.fetch.timeout_seconds == 10.0
        assert settings.fetch.http2 is True

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("PODFEED_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("PODFEED_FETCH_TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("PODFEED_FETCH_MAX_ATTEMPTS", "5")

        settings = Settings()
        assert settings.log_level == "DEBUG"
        assert settings.fetch.timeout_seconds == 2.5
        assert settings.fetch.max_attempts == 5

    def test_fetch_settings_standalone(self, monkeypatch):
        monkeypatch.setenv("PODFEED_FETCH_HTTP2", "false")
        assert FetchSettings().http2 is False


class TestSetupLogging:
    """Tests for structlog configuration."""

    def test_json_logging(self):
        setup_logging(Settings(log_level="DEBUG", json_logs=True))
        assert structlog.is_configured()
        structlog.reset_defaults()

    def test_console_logging(self):
        setup_logging(Settings(log_level="WARNING"))
        assert structlog.is_configured()
        structlog.reset_defaults()

    def test_http_client_loggers_quieted(self):
        setup_logging(Settings(log_level="INFO"))
        assert logging.getLogger("httpx").level == logging.WARNING
        structlog.reset_defaults()

    def test_http_client_loggers_respect_higher_levels(self):
        setup_logging(Settings(log_level="ERROR"))
        assert logging.getLogger("httpcore").level == logging.ERROR
        structlog.reset_defaults()

    @patch("podfeed.logging.get_settings")
    def test_defaults_to_cached_settings(self, mock_get_settings):
        mock_get_settings.return_value = Settings(log_level="ERROR")
        setup_logging()
        mock_get_settings.assert_called_once_with()
        structlog.reset_defaults()
