"""Tests for showdown/config/settings.py — environment-driven settings."""

import logging

import pytest
from pydantic import ValidationError

from showdown.config.settings import Settings, configure_logging, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("SUPABASE_URL", "SUPABASE_ANON_KEY", "DEBUG", "LOG_LEVEL", "DEAL_DELAY_SECONDS"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.high_scores_table == "high_scores"
        assert settings.deal_delay_seconds == 1.5
        assert not settings.persistence_enabled

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")
        monkeypatch.setenv("DEAL_DELAY_SECONDS", "0.25")

        settings = Settings(_env_file=None)
        assert settings.persistence_enabled
        assert settings.deal_delay_seconds == 0.25

    def test_ai_delay_window(self):
        with pytest.raises(ValidationError, match="AI_MAX_DELAY_SECONDS"):
            Settings(_env_file=None, ai_min_delay_seconds=3.0, ai_max_delay_seconds=1.0)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestConfigureLogging:
    def test_debug_overrides_level(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

        configure_logging(Settings(_env_file=None, debug=True, log_level="WARNING"))
        assert calls[0]["level"] == logging.DEBUG

    def test_named_level(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

        configure_logging(Settings(_env_file=None, log_level="warning"))
        assert calls[0]["level"] == "WARNING"
