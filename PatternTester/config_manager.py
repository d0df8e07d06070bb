# config_manager.py
import json
from pathlib import Path

from . import error as E

config_json = Path(__file__).resolve().parent.parent / "config.json"
ui_strings = Path(__file__).resolve().parent.parent / "ui_strings.json"

# Used when config.json is missing or does not mention a key
DEFAULT_SETTINGS = {
    "debug": False,
    "darkmode": False,
    "default_pattern": "VarNum",
    "after_paste_test": False,
    "shift_to_copy": True
}


def load_setting_value(key_value, default=None):
    try:
        with open(config_json, 'r', encoding= 'utf-8') as f:
            settings_dict = json.load(f)

    except (FileNotFoundError, json.JSONDecodeError):
        settings_dict = {}


    if key_value == "all":
        return settings_dict

    if default is None:
        default = DEFAULT_SETTINGS.get(key_value)
    return settings_dict.get(key_value, default)


def load_settings():
    """All settings from config.json, with DEFAULT_SETTINGS filling the gaps."""
    settings_dict = dict(DEFAULT_SETTINGS)
    settings_dict.update(load_setting_value("all"))
    return settings_dict


def load_setting_description(key_value):
    try:
        with open(ui_strings, 'r', encoding= 'utf-8') as f:
            settings_dict = json.load(f)

    except (FileNotFoundError, json.JSONDecodeError):
        return {}


    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, key_value)


def save_setting(settings_dict):
    """Write the whole settings dict back to config.json and return it."""
    for key_value in ("debug", "darkmode", "after_paste_test", "shift_to_copy"):
        if key_value in settings_dict and not isinstance(settings_dict[key_value], bool):
            raise E.ConfigError(f"{key_value} must be True or False", code="5001")

    try:
        with open(config_json, 'w', encoding= 'utf-8') as f:
            json.dump(settings_dict, f, indent=4)
            return settings_dict

    except OSError as e:
        raise E.ConfigError(f"{e}", code="4501")
