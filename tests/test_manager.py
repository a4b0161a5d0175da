"""Tests for loading and saving the configuration file"""

import json

import pytest

from focus_game_deck.config.manager import ConfigurationManager, serialize_document
from focus_game_deck.config.paths import AppPaths
from focus_game_deck.config.schema import ORDER_KEY


def test_save_creates_parent_directories(config_path):
    manager = ConfigurationManager(config_path)

    manager.save(manager.create_default())

    assert config_path.exists()
    assert not config_path.with_name("config.json.tmp").exists()


def test_saved_file_is_pretty_utf8(config_path):
    manager = ConfigurationManager(config_path)
    document = manager.create_default()
    document.games.get("apex").name = "エーペックス"

    manager.save(document)

    text = config_path.read_text(encoding="utf-8")
    assert "エーペックス" in text
    assert text.startswith("{\n  ")
    assert text.endswith("\n")
    assert text == serialize_document(document)


def test_top_level_key_order(config_path):
    manager = ConfigurationManager(config_path)
    manager.save(manager.create_default())

    data = json.loads(config_path.read_text(encoding="utf-8"))

    assert list(data) == ["language", "integrations", "managedApps", "games", "paths", "logging"]
    assert list(data["games"])[0] == ORDER_KEY


def test_load_round_trip_is_stable(config_path):
    manager = ConfigurationManager(config_path)
    manager.save(manager.create_default())
    first = config_path.read_text(encoding="utf-8")

    manager.save(manager.load())

    assert config_path.read_text(encoding="utf-8") == first


def test_load_accepts_bom(config_path, write_config):
    write_config({"games": {"a": {"name": "A", "platform": "ea"}}})
    config_path.write_bytes(b"\xef\xbb\xbf" + config_path.read_bytes())

    document = ConfigurationManager(config_path).load()

    assert document.games.keys() == ["a"]


def test_load_repairs_order_without_touching_file(config_path, write_config):
    write_config({
        "games": {
            ORDER_KEY: ["ghost", "b", "b"],
            "a": {"name": "A", "platform": "ea"},
            "b": {"name": "B", "platform": "ea"},
        },
    })
    before = config_path.read_text(encoding="utf-8")

    document = ConfigurationManager(config_path).load()

    assert document.games.keys() == ["b", "a"]
    assert config_path.read_text(encoding="utf-8") == before


def test_load_rejects_non_object_root(config_path):
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text("[1, 2, 3]", encoding="utf-8")

    with pytest.raises(ValueError):
        ConfigurationManager(config_path).load()


def test_load_invalid_json_raises(config_path):
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text("{not json", encoding="utf-8")

    with pytest.raises(json.JSONDecodeError):
        ConfigurationManager(config_path).load()


def test_unknown_keys_survive_load_and_save(config_path, write_config):
    write_config({
        "futureSetting": {"x": 1},
        "games": {
            ORDER_KEY: ["a"],
            "_comment": "metadata",
            "a": {"name": "A", "platform": "ea", "launchDelay": 5},
        },
    })
    manager = ConfigurationManager(config_path)

    manager.save(manager.load())

    data = json.loads(config_path.read_text(encoding="utf-8"))
    assert data["futureSetting"] == {"x": 1}
    assert data["games"]["_comment"] == "metadata"
    assert data["games"]["a"]["launchDelay"] == 5


def test_config_path_from_environment(monkeypatch, tmp_path):
    target = tmp_path / "custom.json"
    monkeypatch.setenv(AppPaths.CONFIG_ENV_VAR, str(target))

    assert ConfigurationManager().config_path == target


def test_explicit_path_wins_over_environment(monkeypatch, tmp_path):
    monkeypatch.setenv(AppPaths.CONFIG_ENV_VAR, str(tmp_path / "env.json"))

    assert ConfigurationManager(tmp_path / "cli.json").config_path == tmp_path / "cli.json"
