"""Tests for application configuration."""

from pathlib import Path

from speedreader.config import Settings, get_settings
from speedreader.services.engine import RSVPEngine


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.default_wpm == 300
    assert settings.display_default_wpm == 300
    assert (settings.min_wpm, settings.max_wpm) == (100, 1000)
    assert settings.strict_rate_validation is False
    assert settings.settings_path.name == "settings.json"
    assert settings.log_file is None


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("SPEEDREADER_DEFAULT_WPM", "450")
    monkeypatch.setenv("SPEEDREADER_STRICT_RATE_VALIDATION", "true")
    monkeypatch.setenv("SPEEDREADER_SETTINGS_PATH", str(tmp_path / "s.json"))

    settings = Settings(_env_file=None)
    assert settings.default_wpm == 450
    assert settings.strict_rate_validation is True
    assert settings.settings_path == Path(tmp_path / "s.json")


def test_get_settings_is_cached():
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()


def test_engine_from_settings(fake_loop):
    settings = Settings(
        _env_file=None, default_wpm=500, display_default_wpm=250, absolute_min_wpm=10
    )
    engine = RSVPEngine.from_settings(settings, loop=fake_loop)

    assert engine.default_wpm == 500
    assert engine.display_default_wpm == 250
    assert engine.min_wpm == 10
    assert engine.strict is False
