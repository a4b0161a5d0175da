"""Shared fixtures for the editor tests"""

import json

import pytest

from focus_game_deck.core.state import StateManager


@pytest.fixture(autouse=True)
def machine_identity(monkeypatch):
    """Pin the user/machine identity the secret key is derived from."""
    monkeypatch.setenv("USERNAME", "tester")
    monkeypatch.setenv("COMPUTERNAME", "TEST-PC")


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "FocusGameDeck" / "config.json"


@pytest.fixture
def state(config_path):
    """Session loaded from a freshly created sample configuration."""
    manager = StateManager(config_path)
    manager.load()
    return manager


@pytest.fixture
def write_config(config_path):
    """Write a raw configuration dict to the config path."""
    def _write(data):
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(data), encoding="utf-8")
        return config_path
    return _write
