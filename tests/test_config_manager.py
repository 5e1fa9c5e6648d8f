from __future__ import annotations

import json

import pytest

from TreeCalculator import config_manager


@pytest.fixture
def config_path(monkeypatch, tmp_path):
    path = tmp_path / "config.json"
    monkeypatch.setattr(config_manager, "config_json", path)
    return path


def test_missing_file_gives_defaults(config_path) -> None:
    assert config_manager.load_setting_value("all") == config_manager.DEFAULT_SETTINGS
    assert config_manager.load_setting_value("fib_limit") == 10000
    assert config_manager.load_setting_value("unknown") is None


def test_corrupt_file_gives_defaults(config_path) -> None:
    config_path.write_text("{not json", encoding="utf-8")
    assert config_manager.load_setting_value("all") == config_manager.DEFAULT_SETTINGS


def test_file_values_override_defaults(config_path) -> None:
    config_path.write_text(json.dumps({"darkmode": True}), encoding="utf-8")
    settings = config_manager.load_setting_value("all")
    assert settings["darkmode"] is True
    assert settings["show_tree"] is True


def test_save_then_load(config_path) -> None:
    settings = config_manager.load_setting_value("all")
    settings["fib_limit"] = 42
    assert config_manager.save_setting(settings) == settings
    assert config_manager.load_setting_value("fib_limit") == 42


def test_save_failure_returns_empty_dict(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(config_manager, "config_json", tmp_path / "missing" / "config.json")
    assert config_manager.save_setting({"darkmode": True}) == {}


def test_descriptions(monkeypatch, tmp_path) -> None:
    path = tmp_path / "ui_strings.json"
    path.write_text(json.dumps({"darkmode": "Dark mode"}), encoding="utf-8")
    monkeypatch.setattr(config_manager, "ui_strings", path)
    assert config_manager.load_setting_description("darkmode") == "Dark mode"
    assert config_manager.load_setting_description("all") == {"darkmode": "Dark mode"}


def test_shipped_json_files_cover_every_setting() -> None:
    shipped_values = json.loads(config_manager.config_json.read_text(encoding="utf-8"))
    shipped_strings = json.loads(config_manager.ui_strings.read_text(encoding="utf-8"))
    assert set(shipped_values) == set(config_manager.DEFAULT_SETTINGS)
    assert set(shipped_strings) == set(config_manager.DEFAULT_SETTINGS)


def test_integer_settings_written_as_text_are_converted(config_path) -> None:
    config_path.write_text(json.dumps({"fib_limit": "100"}), encoding="utf-8")
    assert config_manager.load_setting_value("fib_limit") == 100

    config_path.write_text(json.dumps({"fib_limit": "lots"}), encoding="utf-8")
    assert config_manager.load_setting_value("fib_limit") == 10000

    config_path.write_text(json.dumps({"darkmode": True, "fib_limit": 7}), encoding="utf-8")
    assert config_manager.load_setting_value("darkmode") is True
    assert config_manager.load_setting_value("fib_limit") == 7
