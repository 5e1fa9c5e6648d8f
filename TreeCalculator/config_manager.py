# config_manager.py
import json
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
config_json = PROJECT_ROOT / "config.json"
ui_strings = PROJECT_ROOT / "ui_strings.json"


# Used whenever config.json is missing, unreadable or lacks a key
DEFAULT_SETTINGS = {
    "darkmode": False,
    "show_tree": True,
    "copy_result": False,
    "debug": False,
    "console_mode": False,
    "fib_limit": 10000,
}


def _read_json(path):
    try:
        with open(path, 'r', encoding='utf-8') as f:
            content = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        return {}

    if not isinstance(content, dict):
        return {}
    return content


def _coerce(key_value, value):
    default = DEFAULT_SETTINGS.get(key_value)
    # Hand-edited files may hold "100" instead of 100
    if isinstance(default, int) and not isinstance(default, bool) and not isinstance(value, int):
        try:
            return int(value)
        except (TypeError, ValueError):
            return default
    return value


def load_setting_value(key_value):
    settings_dict = dict(DEFAULT_SETTINGS)
    for key, value in _read_json(config_json).items():
        settings_dict[key] = _coerce(key, value)

    if key_value == "all":
        return settings_dict

    return settings_dict.get(key_value)


def load_setting_description(key_value):
    descriptions = _read_json(ui_strings)

    if key_value == "all":
        return descriptions

    return descriptions.get(key_value)


def save_setting(settings_dict):
    try:
        with open(config_json, 'w', encoding='utf-8') as f:
            json.dump(settings_dict, f, indent=4)
            return settings_dict

    except (OSError, TypeError):
        return {}
