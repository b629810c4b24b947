"""
Tests for core.settings_manager: defaults, settings file merge, env overrides.
"""

import json

from core.settings_manager import DEFAULT_SETTINGS, load_settings


def _write_settings(tmp_path, monkeypatch, payload):
    path = tmp_path / "viewer_settings.json"
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    monkeypatch.setenv("DROP_VIEWER_SETTINGS_FILE", str(path))
    return path


def test_defaults_when_no_file():
    assert load_settings() == DEFAULT_SETTINGS


def test_defaults_are_not_shared():
    settings = load_settings()
    settings["page_title"] = "changed"
    assert DEFAULT_SETTINGS["page_title"] == "Equipment Drop Viewer"


def test_file_values_are_merged(tmp_path, monkeypatch):
    _write_settings(tmp_path, monkeypatch, {
        "page_title": "Mir Drops",
        "data_source": "http://localhost:8000/equipment_data.json",
        "unknown_key": 1,
    })
    settings = load_settings()
    assert settings["page_title"] == "Mir Drops"
    assert settings["data_source"] == "http://localhost:8000/equipment_data.json"
    assert "unknown_key" not in settings


def test_env_overrides_file(tmp_path, monkeypatch):
    _write_settings(tmp_path, monkeypatch, {"data_source": "from_file.json"})
    monkeypatch.setenv("DROP_VIEWER_DATA_SOURCE", "from_env.json")
    monkeypatch.setenv("DROP_VIEWER_PAGE_TITLE", "Env Title")
    settings = load_settings()
    assert settings["data_source"] == "from_env.json"
    assert settings["page_title"] == "Env Title"


def test_unreadable_file_falls_back_to_defaults(tmp_path, monkeypatch):
    _write_settings(tmp_path, monkeypatch, "{not json")
    assert load_settings() == DEFAULT_SETTINGS


def test_non_dict_file_falls_back_to_defaults(tmp_path, monkeypatch):
    _write_settings(tmp_path, monkeypatch, [1, 2, 3])
    assert load_settings() == DEFAULT_SETTINGS


def test_page_size_is_not_configurable_and_sort_is_validated(tmp_path, monkeypatch):
    _write_settings(tmp_path, monkeypatch, {"items_per_page": 10, "default_sort": "colour"})
    settings = load_settings()
    assert "items_per_page" not in settings
    assert settings["default_sort"] == "name"


def test_valid_default_sort_is_kept(tmp_path, monkeypatch):
    _write_settings(tmp_path, monkeypatch, {"default_sort": "probability"})
    assert load_settings()["default_sort"] == "probability"
