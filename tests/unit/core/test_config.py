"""
Unit tests for application settings and logging setup.
"""

import logging

import pytest
from pydantic import ValidationError

from app.core.config import Settings
from app.core.logging import configure_logging


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("FATIGUE_LOOKBACK_DAYS", raising=False)
        s = Settings(_env_file=None)
        assert s.LOG_LEVEL == "INFO"
        assert s.FATIGUE_LOOKBACK_DAYS == 14
        assert s.DEBUG is False

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("FATIGUE_LOOKBACK_DAYS", "21")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings(_env_file=None)
        assert s.FATIGUE_LOOKBACK_DAYS == 21
        assert s.LOG_LEVEL == "DEBUG"

    @pytest.mark.parametrize("value", ["0", "120"])
    def test_lookback_bounds(self, monkeypatch, value):
        monkeypatch.setenv("FATIGUE_LOOKBACK_DAYS", value)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestConfigureLogging:

    @pytest.fixture(autouse=True)
    def _restore_root_level(self):
        root = logging.getLogger()
        level = root.level
        yield
        root.setLevel(level)

    def test_sets_level_from_name(self):
        configure_logging("debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_name_falls_back_to_info(self):
        configure_logging("chatty")
        assert logging.getLogger().level == logging.INFO

    def test_repeated_calls_keep_one_handler(self):
        configure_logging("INFO")
        handlers = len(logging.getLogger().handlers)
        configure_logging("WARNING")
        assert len(logging.getLogger().handlers) == handlers
        assert logging.getLogger().level == logging.WARNING
