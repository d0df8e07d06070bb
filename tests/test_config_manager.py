"""Tests for the JSON settings layer and the error types."""

import json

import pytest

from PatternTester import config_manager
from PatternTester import error as E


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setattr(config_manager, "config_json", path)
    return path


@pytest.fixture
def strings_file(tmp_path, monkeypatch):
    path = tmp_path / "ui_strings.json"
    monkeypatch.setattr(config_manager, "ui_strings", path)
    return path


class TestLoadSettings:
    def test_missing_file(self, config_file):
        assert config_manager.load_setting_value("all") == {}
        assert config_manager.load_setting_value("darkmode") is False
        assert config_manager.load_setting_value("default_pattern") == "VarNum"

    def test_explicit_default(self, config_file):
        assert config_manager.load_setting_value("unknown", default=3) == 3

    def test_broken_json(self, config_file):
        config_file.write_text("{not json", encoding="utf-8")
        assert config_manager.load_setting_value("all") == {}

    def test_values_from_file(self, config_file):
        config_file.write_text(json.dumps({"darkmode": True}), encoding="utf-8")
        assert config_manager.load_setting_value("darkmode") is True

    def test_load_settings_fills_defaults(self, config_file):
        config_file.write_text(json.dumps({"default_pattern": "Exp1"}), encoding="utf-8")
        settings = config_manager.load_settings()
        assert settings["default_pattern"] == "Exp1"
        assert settings["debug"] is False
        assert set(settings) == set(config_manager.DEFAULT_SETTINGS)


class TestSaveSetting:
    def test_round_trip(self, config_file):
        settings = dict(config_manager.DEFAULT_SETTINGS, darkmode=True)
        assert config_manager.save_setting(settings) == settings
        assert config_manager.load_setting_value("all") == settings

    def test_rejects_non_bool_switch(self, config_file):
        with pytest.raises(E.ConfigError) as excinfo:
            config_manager.save_setting({"debug": "yes"})
        assert excinfo.value.code == "5001"
        assert not config_file.exists()

    def test_unwritable_location(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config_manager, "config_json", tmp_path / "missing" / "config.json")
        with pytest.raises(E.ConfigError) as excinfo:
            config_manager.save_setting({"darkmode": False})
        assert excinfo.value.code == "4501"


class TestDescriptions:
    def test_missing_file(self, strings_file):
        assert config_manager.load_setting_description("all") == {}

    def test_known_and_unknown_keys(self, strings_file):
        strings_file.write_text(json.dumps({"darkmode": "Dark mode"}), encoding="utf-8")
        assert config_manager.load_setting_description("darkmode") == "Dark mode"
        assert config_manager.load_setting_description("debug") == "debug"


class TestErrors:
    def test_attributes(self):
        error = E.PatternError("Unknown pattern: Foo", code="3030", equation="1+1")
        assert isinstance(error, E.MathError)
        assert str(error) == "Unknown pattern: Foo"
        assert (error.message, error.code, error.equation) == ("Unknown pattern: Foo", "3030", "1+1")

    def test_default_code(self):
        assert E.MathError("boom").code == "9999"

    def test_codes_have_messages(self):
        for code in ("3004", "3005", "3030", "4002", "4501", "5001", "9999"):
            assert code in E.ERROR_MESSAGES
