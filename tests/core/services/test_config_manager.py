"""
test_config_manager.py
----------------------
Unit tests for JSON config loading and merging.
"""

import json

import pytest

from src.core.services import config_manager
from src.core.services.config_manager import load_config, rebuild_file_index


DEFAULTS = {
    "display": {"window_size": "medium", "fullscreen": False},
    "building": {"rooms_per_floor": 3},
}


@pytest.fixture
def write_json(tmp_path):
    def _write(name, data):
        path = tmp_path / name
        path.write_text(data if isinstance(data, str) else json.dumps(data))
        return str(path)
    return _write


class TestLoadConfig:

    def test_merges_over_defaults(self, write_json):
        path = write_json("settings.json", {
            "_notes": "ignored",
            "display": {"window_size": "large"},
            "extra": 1,
        })
        config = load_config(path, DEFAULTS)

        assert config["display"] == {"window_size": "large", "fullscreen": False}
        assert config["building"] == {"rooms_per_floor": 3}
        assert config["extra"] == 1
        assert "_notes" not in config

    def test_defaults_not_mutated(self, write_json):
        path = write_json("settings.json", {"display": {"window_size": "small"}})
        config = load_config(path, DEFAULTS)
        config["building"]["rooms_per_floor"] = 99

        assert DEFAULTS["display"]["window_size"] == "medium"
        assert DEFAULTS["building"]["rooms_per_floor"] == 3

    def test_missing_file_returns_defaults(self, tmp_path):
        config = load_config(str(tmp_path / "nope.json"), DEFAULTS)
        assert config == DEFAULTS
        assert config is not DEFAULTS

    def test_invalid_json(self, write_json):
        path = write_json("broken.json", "{not json")
        assert load_config(path, DEFAULTS) == DEFAULTS
        with pytest.raises(FileNotFoundError):
            load_config(path, DEFAULTS, strict=True)

    def test_non_object_top_level(self, write_json):
        path = write_json("list.json", [1, 2, 3])
        assert load_config(path) == {}

    def test_lookup_by_name_through_index(self, tmp_path, write_json, monkeypatch):
        write_json("custom_settings.json", {"building": {"rooms_per_floor": 4}})
        monkeypatch.setattr(config_manager, "SEARCH_DIRS", [str(tmp_path)])
        monkeypatch.setattr(config_manager, "_FILE_INDEX", None)
        rebuild_file_index()

        assert load_config("custom_settings.json", DEFAULTS)["building"]["rooms_per_floor"] == 4
        assert load_config("custom_settings", DEFAULTS)["building"]["rooms_per_floor"] == 4

    def test_packaged_settings(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(config_manager, "_FILE_INDEX", None)
        config = load_config("settings.json", strict=True)
        assert "building" in config
        assert "layout" in config
