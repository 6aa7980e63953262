"""Tests for environment-driven settings."""

from dishmate.config.settings import Settings


def test_defaults(monkeypatch):
    """Test default logging settings when no environment is set."""
    for name in ("DISHMATE_LOG_LEVEL", "DISHMATE_LOG_FILE", "DISHMATE_LOG_ROTATION", "DISHMATE_LOG_RETENTION"):
        monkeypatch.delenv(name, raising=False)

    config = Settings(_env_file=None)

    assert config.log_level == "INFO"
    assert config.log_file is None
    assert config.log_rotation == "10 MB"
    assert config.log_retention == "7 days"


def test_environment_overrides(monkeypatch):
    """Test that DISHMATE_ variables override the defaults."""
    monkeypatch.setenv("DISHMATE_LOG_LEVEL", "debug")
    monkeypatch.setenv("DISHMATE_LOG_FILE", "logs/dishmate.log")
    monkeypatch.setenv("DISHMATE_LOG_RETENTION", "1 month")

    config = Settings(_env_file=None)

    assert config.log_level == "DEBUG"
    assert config.log_file == "logs/dishmate.log"
    assert config.log_retention == "1 month"


def test_invalid_log_level_falls_back_to_info(monkeypatch):
    """Test that an unknown level is replaced with INFO rather than failing."""
    monkeypatch.setenv("DISHMATE_LOG_LEVEL", "chatty")

    assert Settings(_env_file=None).log_level == "INFO"


def test_blank_log_file_means_console_only(monkeypatch):
    """Test that an empty log file path is treated as unset."""
    monkeypatch.setenv("DISHMATE_LOG_FILE", "   ")

    assert Settings(_env_file=None).log_file is None
