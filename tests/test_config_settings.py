"""
Tests for the global settings singleton (get_settings / reset_settings).
"""

from configutils.config.accessor import SettingsAccessor
from configutils.config.settings import get_settings, reset_settings


def test_get_settings_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("CONFIGUTILS_PORT", "9000")

    settings = get_settings(dotenv_path=tmp_path / "absent.env")

    assert isinstance(settings, SettingsAccessor)
    assert settings.get_typed("CONFIGUTILS_PORT", 8080) == 9000


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_reset_settings_creates_new_accessor():
    first = get_settings()
    reset_settings()

    assert get_settings() is not first


def test_get_settings_loads_dotenv_without_overriding_environment(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("CONFIGUTILS_FROM_FILE=file\nCONFIGUTILS_BOTH=file\n")
    # set-then-delete so monkeypatch removes what load_dotenv() adds
    monkeypatch.setenv("CONFIGUTILS_FROM_FILE", "placeholder")
    monkeypatch.delenv("CONFIGUTILS_FROM_FILE")
    monkeypatch.setenv("CONFIGUTILS_BOTH", "environment")

    settings = get_settings(dotenv_path=env_file)

    assert settings.get_required("CONFIGUTILS_FROM_FILE") == "file"
    assert settings.get_required("CONFIGUTILS_BOTH") == "environment"
