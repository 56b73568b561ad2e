"""Tests for configuration module."""

import pytest

from taglog import InvalidConfiguration, Logger, PreserveMode
from taglog.config import LoggerSettings, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run each test away from any .env file and TAGLOG_* variables."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "TAGLOG_PATH",
        "TAGLOG_CONSOLE",
        "TAGLOG_PRESERVE_MODE",
        "TAGLOG_DATES_IN_CONSOLE",
        "TAGLOG_DATES_IN_FILE",
        "TAGLOG_TIMESTAMP_FORMAT",
        "TAGLOG_COLORIZE",
        "TAGLOG_ENCODING",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettingsDefaults:
    """Test LoggerSettings default values."""

    def test_defaults(self):
        """✅ Test defaults match the Logger constructor defaults."""
        settings = LoggerSettings()

        assert settings.path is None
        assert settings.console is True
        assert settings.preserve_mode is None
        assert settings.dates_in_console is False
        assert settings.dates_in_file is True
        assert settings.timestamp_format is None
        assert settings.colorize is None
        assert settings.encoding == "utf-8"


class TestSettingsEnvironment:
    """Test reading settings from TAGLOG_* variables."""

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("TAGLOG_PATH", "/tmp/app.log")
        monkeypatch.setenv("TAGLOG_CONSOLE", "false")
        monkeypatch.setenv("TAGLOG_PRESERVE_MODE", "move_to_another_file")
        monkeypatch.setenv("TAGLOG_DATES_IN_FILE", "0")

        settings = load_settings()

        assert settings.path == "/tmp/app.log"
        assert settings.console is False
        assert settings.preserve_mode is PreserveMode.MOVE_TO_ANOTHER_FILE
        assert settings.dates_in_file is False

    def test_env_file(self, tmp_path):
        (tmp_path / ".env").write_text("TAGLOG_DATES_IN_CONSOLE=true\n")

        assert load_settings().dates_in_console is True

    def test_bad_preserve_mode(self, monkeypatch):
        """❌ Test an unknown mode is reported as InvalidConfiguration."""
        monkeypatch.setenv("TAGLOG_PRESERVE_MODE", "rotate")

        with pytest.raises(InvalidConfiguration):
            load_settings()

    def test_overrides(self):
        settings = load_settings(console=False, path="x.log")

        assert settings.console is False
        assert settings.path == "x.log"


class TestLoggerFromSettings:
    """Test Logger.from_settings."""

    def test_from_settings_object(self, tmp_path):
        path = tmp_path / "app.log"
        path.write_text("OLD")
        settings = LoggerSettings(
            path=str(path),
            console=False,
            preserve_mode=PreserveMode.OVERRIDE,
            dates_in_file=False,
            dates_in_console=True,
        )

        log = Logger.from_settings(settings)
        log.info("hi")

        assert log.output_dates_in_console is True
        assert log.output_dates_in_file is False
        assert path.read_text() == "[INFO] hi\n"

    def test_from_env(self, monkeypatch, tmp_path):
        path = tmp_path / "env.log"
        monkeypatch.setenv("TAGLOG_PATH", str(path))
        monkeypatch.setenv("TAGLOG_CONSOLE", "false")
        monkeypatch.setenv("TAGLOG_DATES_IN_FILE", "false")

        log = Logger.from_settings()
        log.error("x")

        assert log.path == str(path)
        assert path.read_text() == "[ERROR] x\n"

    def test_no_sinks(self):
        """❌ Test settings that disable every sink are rejected."""
        with pytest.raises(InvalidConfiguration):
            Logger.from_settings(LoggerSettings(console=False))
