import json

import pytest

from Calculator import config_manager
from Calculator import error as E


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    monkeypatch.setattr(config_manager, "config_json", path)
    return path


def test_missing_file_falls_back_to_defaults(config_file):
    assert config_manager.load_setting_value("all") == config_manager.DEFAULT_SETTINGS
    assert config_manager.load_setting_value("prompt") == ">> "


def test_corrupt_file_falls_back_to_defaults(config_file):
    config_file.write_text("{not json", encoding="utf-8")
    assert config_manager.load_setting_value("debug") is False


def test_file_values_override_defaults(config_file):
    config_file.write_text(json.dumps({"prompt": "$ "}), encoding="utf-8")
    settings = config_manager.load_setting_value("all")
    assert settings["prompt"] == "$ "
    assert settings["quit_message"] == "quitting..."


def test_unknown_key(config_file):
    assert config_manager.load_setting_value("darkmode") is None


def test_save_and_reload(config_file):
    settings = config_manager.load_setting_value("all")
    settings["show_error_codes"] = False
    assert config_manager.save_setting(settings) == settings
    assert config_manager.load_setting_value("show_error_codes") is False


def test_save_failure_raises(tmp_path, monkeypatch):
    monkeypatch.setattr(config_manager, "config_json", tmp_path / "missing" / "config.json")
    with pytest.raises(E.MathError) as info:
        config_manager.save_setting({"debug": True})
    assert info.value.code == "5000"


def test_shipped_config_matches_defaults():
    with open(config_manager.config_json, encoding="utf-8") as f:
        assert json.load(f) == config_manager.DEFAULT_SETTINGS
