# config_manager.py
import json
from pathlib import Path

from . import error as E

config_json = Path(__file__).resolve().parent.parent / "config.json"


DEFAULT_SETTINGS = {
    "prompt": ">> ",
    "quit_message": "quitting...",
    "show_error_codes": True,
    "debug": False,
}


def load_setting_value(key_value):
    """Return one setting, or every setting for key_value == "all".

    A missing or unreadable config file falls back to DEFAULT_SETTINGS.
    """
    settings_dict = dict(DEFAULT_SETTINGS)
    try:
        with open(config_json, 'r', encoding='utf-8') as f:
            settings_dict.update(json.load(f))

    except (FileNotFoundError, json.JSONDecodeError):
        pass

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value)


def save_setting(settings_dict):
    try:
        with open(config_json, 'w', encoding='utf-8') as f:
            json.dump(settings_dict, f, indent=4)
            return settings_dict

    except OSError as e:
        raise E.MathError(E.message("5000", str(e)), code="5000")
