"""Tests for the editor session and its rename-safe mutations"""

import pytest

from focus_game_deck.config.manager import ConfigurationManager
from focus_game_deck.config.schema import GameEntry, Platform
from focus_game_deck.core.messages import MessageKey, OperationResult
from focus_game_deck.core.state import StateManager


# ---------------------------------------------------------------------------
# Load / save
# ---------------------------------------------------------------------------

def test_missing_file_is_created_on_load(config_path):
    state = StateManager(config_path)

    result = state.load()

    assert result.ok
    assert result.message.key is MessageKey.CONFIG_CREATED
    assert config_path.exists()
    assert state.session.created_on_load
    assert state.session.load_error is None
    assert not state.is_modified()
    assert not state.has_unsaved_changes()


def test_load_selects_first_entries(state):
    assert state.session.selected_game_id == "apex"
    assert state.session.selected_app_id == "noWinKey"
    assert state.selected_game().name == "Apex Legends"


def test_corrupt_file_falls_back_without_overwriting(config_path):
    config_path.parent.mkdir(parents=True)
    config_path.write_text("{broken", encoding="utf-8")
    state = StateManager(config_path)

    result = state.load()

    assert not result.ok
    assert result.message.key is MessageKey.CONFIG_LOAD_FAILED
    assert state.session.load_error == result.message
    assert "apex" in state.document.games
    assert config_path.read_text(encoding="utf-8") == "{broken"


@pytest.mark.parametrize("number", ["1e999", "Infinity", "-Infinity"])
def test_overflowing_number_loads_with_default(config_path, number):
    config_path.parent.mkdir(parents=True)
    config_path.write_text('{"logging": {"logRetentionDays": ' + number + "}}", encoding="utf-8")
    state = StateManager(config_path)

    result = state.load()

    assert result.ok
    assert state.session.load_error is None
    assert state.document.logging.log_retention_days == 90


def test_any_parse_error_falls_back_to_sample(config_path, write_config, monkeypatch):
    write_config({"games": {}})
    before = config_path.read_text(encoding="utf-8")

    def explode(self):
        raise RuntimeError("unexpected shape")

    monkeypatch.setattr(ConfigurationManager, "load", explode)
    state = StateManager(config_path)

    result = state.load()

    assert not result.ok
    assert result.message.key is MessageKey.CONFIG_LOAD_FAILED
    assert result.message.args[1] == "unexpected shape"
    assert "apex" in state.document.games
    assert config_path.read_text(encoding="utf-8") == before


def test_save_failure_when_creating_is_reported(config_path, monkeypatch):
    def refuse(self, document):
        raise PermissionError("read-only")

    monkeypatch.setattr(ConfigurationManager, "save", refuse)
    state = StateManager(config_path)

    result = state.load()

    assert not result.ok
    assert result.message.key is MessageKey.CONFIG_SAVE_FAILED
    assert "apex" in state.document.games


def test_document_without_load_is_the_sample(config_path):
    state = StateManager(config_path)

    assert state.document.games.keys() == ["apex", "valorant", "fallguys", "genshin"]
    assert not config_path.exists()


def test_save_clears_modified_and_updates_baseline(state, config_path):
    state.add_game("newOne")
    assert state.is_modified()
    assert state.has_unsaved_changes()

    result = state.save()

    assert result.ok
    assert result.message.key is MessageKey.CONFIG_SAVED
    assert not state.is_modified()
    assert not state.has_unsaved_changes()
    assert "newOne" in StateManager(config_path).config_manager.load().games


def test_save_failure_keeps_modified(state, monkeypatch):
    def refuse(self, document):
        raise OSError("disk full")

    state.add_game("newOne")
    monkeypatch.setattr(ConfigurationManager, "save", refuse)

    result = state.save()

    assert not result.ok
    assert result.message.key is MessageKey.CONFIG_SAVE_FAILED
    assert state.is_modified()


def test_undone_edit_has_no_unsaved_changes(state):
    state.add_game("temp")
    state.delete_game("temp")

    assert state.is_modified()
    assert not state.has_unsaved_changes()


# ---------------------------------------------------------------------------
# Games
# ---------------------------------------------------------------------------

def test_add_game_uses_fresh_ids(state):
    first = state.add_game()
    second = state.add_game()

    assert first.entity_id == "newGame"
    assert second.entity_id == "newGame1"
    assert state.document.games.keys()[-2:] == ["newGame", "newGame1"]
    assert state.session.selected_game_id == "newGame1"
    assert state.is_modified()


def test_add_game_with_taken_id_changes_nothing(state):
    before = state.snapshot_for_comparison()

    result = state.add_game("apex", GameEntry(name="Other", platform=Platform.EA))

    assert not result.ok
    assert result.message.key is MessageKey.GAME_ID_ALREADY_EXISTS
    assert state.snapshot_for_comparison() == before
    assert not state.is_modified()


def test_duplicate_game_is_placed_after_source(state):
    result = state.duplicate_game("apex")

    assert result.entity_id == "apex_copy"
    assert state.document.games.keys()[:2] == ["apex", "apex_copy"]

    state.document.games.get("apex_copy").apps_to_manage.append("clibor")
    assert "clibor" not in state.document.games.get("apex").apps_to_manage


def test_duplicate_unknown_game(state):
    assert state.duplicate_game("nope").message.key is MessageKey.GAME_NOT_FOUND


def test_delete_game_selects_neighbour(state):
    state.select_game("valorant")

    state.delete_game("valorant")

    assert "valorant" not in state.document.games
    assert "valorant" not in state.document.games.order
    assert state.session.selected_game_id == "fallguys"


def test_delete_last_game_selects_previous(state):
    state.select_game("genshin")

    state.delete_game("genshin")

    assert state.session.selected_game_id == "fallguys"


def test_delete_every_game_clears_selection(state):
    for game_id in state.document.games.keys():
        state.delete_game(game_id)

    assert state.session.selected_game_id is None
    assert state.selected_game() is None


def test_rename_game_keeps_position_and_selection(state):
    result = state.rename_game("apex", "apexLegends")

    assert result.ok
    assert state.document.games.keys()[0] == "apexLegends"
    assert "apex" not in state.document.games
    assert state.session.selected_game_id == "apexLegends"
    assert state.selected_game().name == "Apex Legends"


def test_rejected_rename_leaves_document_unchanged(state):
    before = state.snapshot_for_comparison()

    taken = state.rename_game("apex", "valorant")
    empty = state.rename_game("apex", "")

    assert taken.message.key is MessageKey.GAME_ID_ALREADY_EXISTS
    assert empty.message.key is MessageKey.GAME_ID_CANNOT_BE_EMPTY
    assert state.snapshot_for_comparison() == before
    assert not state.is_modified()


def test_ids_starting_with_underscore_are_rejected(state):
    before = state.snapshot_for_comparison()

    added = state.add_game("_apex")
    renamed_game = state.rename_game("apex", "_order")
    renamed_app = state.rename_app("noWinKey", "_noWinKey")
    added_app = state.add_app("_tool")

    assert added.message.key is MessageKey.GAME_ID_INVALID
    assert renamed_game.message.key is MessageKey.GAME_ID_INVALID
    assert renamed_app.message.key is MessageKey.APP_ID_INVALID
    assert added_app.message.key is MessageKey.APP_ID_INVALID
    assert state.snapshot_for_comparison() == before
    assert not state.is_modified()


def test_rename_to_same_id_is_a_no_op(state):
    result = state.rename_game("apex", "apex")

    assert result.ok
    assert not state.is_modified()


def test_rename_unknown_game(state):
    assert state.rename_game("nope", "x").message.key is MessageKey.GAME_NOT_FOUND


def test_move_game_is_clamped(state):
    assert state.move_game("valorant", -1).ok
    assert state.document.games.keys()[0] == "valorant"

    state.clear_modified()
    state.move_game("valorant", -5)

    assert state.document.games.keys()[0] == "valorant"
    assert not state.is_modified()


def test_select_unknown_game(state):
    assert not state.select_game("nope")
    assert state.session.selected_game_id == "apex"


# ---------------------------------------------------------------------------
# Managed apps
# ---------------------------------------------------------------------------

def test_add_app(state):
    result = state.add_app()

    assert result.entity_id == "newApp"
    assert state.selected_app().display_name == "New App"


def test_delete_app_removes_every_reference(state):
    apex = state.document.games.get("apex")
    apex.apps_to_manage.append("noWinKey")

    result = state.delete_app("noWinKey")

    assert result.ok
    assert "noWinKey" not in state.document.managed_apps
    assert apex.apps_to_manage == ["autoHotkey", "discord"]
    assert state.document.games.get("valorant").apps_to_manage == ["clibor"]
    assert state.session.selected_app_id == "autoHotkey"


def test_rename_app_rewrites_references_in_place(state):
    apex = state.document.games.get("apex")
    apex.apps_to_manage[:] = ["noWinKey", "discord", "noWinKey"]

    result = state.rename_app("noWinKey", "winKeyBlocker")

    assert result.ok
    assert state.document.managed_apps.keys()[0] == "winKeyBlocker"
    assert apex.apps_to_manage == ["winKeyBlocker", "discord", "winKeyBlocker"]
    assert state.document.games.get("valorant").apps_to_manage == ["winKeyBlocker", "clibor"]
    assert state.document.games_referencing("noWinKey") == []
    assert state.session.selected_app_id == "winKeyBlocker"


def test_rejected_app_rename_leaves_document_unchanged(state):
    before = state.snapshot_for_comparison()

    result = state.rename_app("noWinKey", "clibor")

    assert result.message.key is MessageKey.APP_ID_ALREADY_EXISTS
    assert state.snapshot_for_comparison() == before


def test_move_app(state):
    state.move_app("discord", -10)

    assert state.document.managed_apps.keys()[0] == "discord"


def test_unknown_app_operations(state):
    assert state.delete_app("nope").message.key is MessageKey.APP_NOT_FOUND
    assert state.rename_app("nope", "x").message.key is MessageKey.APP_NOT_FOUND
    assert state.move_app("nope", 1).message.key is MessageKey.APP_NOT_FOUND


# ---------------------------------------------------------------------------
# Guarded execution
# ---------------------------------------------------------------------------

def test_unexpected_error_rolls_back(state):
    before = state.snapshot_for_comparison()

    def explode() -> OperationResult:
        state.document.games.remove("apex")
        state.session.selected_game_id = None
        state.mark_modified()
        raise RuntimeError("boom")

    result = state.run_guarded("test operation", explode)

    assert not result.ok
    assert result.message.key is MessageKey.UNEXPECTED_ERROR
    assert result.message.args == ("test operation", "boom")
    assert state.snapshot_for_comparison() == before
    assert state.session.selected_game_id == "apex"
    assert not state.is_modified()


@pytest.mark.parametrize("operation", ["add", "rename", "delete"])
def test_failed_mutation_keeps_session_usable(state, operation):
    if operation == "add":
        state.add_game("")
    elif operation == "rename":
        state.rename_game("apex", "")
    else:
        state.delete_game("nope")

    assert state.add_game("afterwards").ok
