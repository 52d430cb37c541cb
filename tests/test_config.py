import logging

import pytest

from survey_dashboard import config


def test_load_settings_defaults():
    settings = config.load_settings()

    assert settings == config.Settings()


def test_load_settings_from_environment(monkeypatch):
    monkeypatch.setenv("SURVEY_DATA_SOURCE", " MOCK ")
    monkeypatch.setenv("SURVEY_FETCH_DELAY_SCALE", "0")
    monkeypatch.setenv("SURVEY_DISPLAY_TIMEZONE", "Europe/London")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = config.load_settings()

    assert settings.data_source == "mock"
    assert settings.fetch_delay_scale == 0.0
    assert settings.display_timezone == "Europe/London"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("raw,expected", [("abc", 1.0), ("-2", 0.0), ("0.25", 0.25)])
def test_delay_scale_parsing(monkeypatch, raw, expected):
    monkeypatch.setenv("SURVEY_FETCH_DELAY_SCALE", raw)

    assert config.load_settings().fetch_delay_scale == expected


def test_unknown_data_source_raises(monkeypatch):
    monkeypatch.setenv("SURVEY_DATA_SOURCE", "spreadsheet")

    with pytest.raises(RuntimeError, match="Unknown SURVEY_DATA_SOURCE"):
        config.load_settings()


def test_get_setting_prefers_environment(monkeypatch):
    monkeypatch.setenv("SURVEY_DISPLAY_TIMEZONE", "Asia/Jakarta")

    assert config.get_setting("SURVEY_DISPLAY_TIMEZONE", "UTC") == "Asia/Jakarta"


def test_get_setting_falls_back_to_default():
    assert config.get_setting("SURVEY_SETTING_THAT_IS_NOT_SET", "fallback") == "fallback"


def test_tabs_are_ordered():
    assert [tab.key for tab in config.TABS] == ["overview", "survey_form", "responses"]


def test_configure_logging_sets_root_level():
    root = logging.getLogger()
    previous = root.level
    try:
        config.configure_logging("debug")
        assert root.level == logging.DEBUG
        config.configure_logging("not-a-level")
        assert root.level == logging.INFO
    finally:
        root.setLevel(previous)
