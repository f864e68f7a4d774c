"""
Tests for runtime settings.
"""
import pytest
from pydantic import ValidationError

from vent_escape.config import Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        for name in ("VENT_ESCAPE_FPS", "VENT_ESCAPE_SEED", "VENT_ESCAPE_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.fps == 60
        assert settings.seed is None
        assert settings.log_level == "INFO"
        assert not settings.fullscreen

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("VENT_ESCAPE_FPS", "30")
        monkeypatch.setenv("VENT_ESCAPE_SEED", "42")
        monkeypatch.setenv("VENT_ESCAPE_LOG_LEVEL", "debug")
        settings = Settings(_env_file=None)
        assert settings.fps == 30
        assert settings.seed == 42
        assert settings.log_level == "DEBUG"

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("VENT_ESCAPE_LOG_LEVEL", "loud")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_fps_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("VENT_ESCAPE_FPS", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()
