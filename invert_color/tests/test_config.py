"""Tests for environment-driven settings and logging setup."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from invert_color.config import Settings, configure_logging, get_settings


@pytest.fixture
def restore_package_logger():
    package_logger = logging.getLogger("invert_color")
    level = package_logger.level
    yield package_logger
    package_logger.setLevel(level)


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("INVERT_COLOR_LOG_LEVEL", raising=False)
        monkeypatch.delenv("INVERT_COLOR_DEBUG", raising=False)
        settings = Settings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.debug is False
        assert settings.effective_log_level == logging.INFO

    def test_reads_prefixed_env(self, monkeypatch):
        monkeypatch.setenv("INVERT_COLOR_LOG_LEVEL", "warning")
        settings = Settings(_env_file=None)
        assert settings.log_level == "WARNING"
        assert settings.effective_log_level == logging.WARNING

    def test_debug_overrides_level(self, monkeypatch):
        monkeypatch.setenv("INVERT_COLOR_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("INVERT_COLOR_DEBUG", "true")
        assert Settings(_env_file=None).effective_log_level == logging.DEBUG

    def test_unknown_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD", _env_file=None)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestConfigureLogging:
    def test_sets_package_logger_level(self, restore_package_logger):
        configure_logging(Settings(log_level="ERROR", _env_file=None))
        assert restore_package_logger.level == logging.ERROR

    def test_debug_flag(self, restore_package_logger):
        configure_logging(Settings(debug=True, _env_file=None))
        assert restore_package_logger.level == logging.DEBUG

    def test_defaults_to_cached_settings(self, monkeypatch, restore_package_logger):
        monkeypatch.setenv("INVERT_COLOR_LOG_LEVEL", "CRITICAL")
        configure_logging()
        assert restore_package_logger.level == logging.CRITICAL
