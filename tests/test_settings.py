from __future__ import annotations

import json

from tdsvg.core.settings import (
    PROJECT_SETTINGS_FILENAME,
    ExportSettings,
    find_project_settings_path,
    load_project_settings,
)
from tdsvg.core.version import DEFAULT_EXPORT_VERSION


def _write_settings(directory, data):
    (directory / PROJECT_SETTINGS_FILENAME).write_text(json.dumps(data), encoding="utf-8")


def test_defaults_without_file(clean_env):
    assert find_project_settings_path() is None
    s = ExportSettings.load()
    assert s == ExportSettings(rotated=False, app_version=DEFAULT_EXPORT_VERSION)


def test_file_found_from_subdirectory(clean_env):
    (clean_env / PROJECT_SETTINGS_FILENAME).write_text(
        json.dumps({"export": {"rotated": True, "app_version": "2019.2.1"}}), encoding="utf-8"
    )
    sub = clean_env / "a" / "b"
    sub.mkdir(parents=True)
    s = ExportSettings.load(start=sub)
    assert s.rotated is True
    assert s.app_version == "2019.2.1"


def test_env_overrides_file(clean_env, monkeypatch):
    _write_settings(clean_env, ExportSettings(rotated=True, app_version="1.0").to_dict())
    monkeypatch.setenv("TDSVG_EXPORT_ROTATED", "no")
    monkeypatch.setenv("TDSVG_APP_VERSION", "9.9.9")
    s = ExportSettings.load()
    assert s == ExportSettings(rotated=False, app_version="9.9.9")
    assert ExportSettings.load(prefer_env=False) == ExportSettings(rotated=True, app_version="1.0")


def test_invalid_json_falls_back(clean_env):
    (clean_env / PROJECT_SETTINGS_FILENAME).write_text("{not json", encoding="utf-8")
    assert load_project_settings() == {}
    assert ExportSettings.load() == ExportSettings()


def test_integer_rotated_flag(clean_env):
    _write_settings(clean_env, {"export": {"rotated": 1}})
    assert load_project_settings(clean_env) == {"export": {"rotated": 1}}
    assert ExportSettings.load().rotated is True
