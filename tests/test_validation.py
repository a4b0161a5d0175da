"""Tests for game and app validators"""

import pytest

from focus_game_deck.core.form import Field
from focus_game_deck.core.messages import MessageKey
from focus_game_deck.core.validation import GameCandidate, validate_app, validate_game, validate_game_id

EXISTING = ["apex", "valorant"]


def test_valid_steam_game():
    report = validate_game(GameCandidate("apex", "steam", steam_app_id="1172470"), "apex", EXISTING)

    assert report.ok
    assert report.first is None
    assert report.to_result().ok


def test_empty_game_id():
    report = validate_game(GameCandidate("", "steam", steam_app_id="1"), "apex", EXISTING)

    assert report.first.key is MessageKey.GAME_ID_CANNOT_BE_EMPTY
    assert report.first.field == Field.GAME_ID


def test_changed_game_id_must_be_unique():
    report = validate_game(GameCandidate("valorant", "steam", steam_app_id="1"), "apex", EXISTING)

    assert report.first.key is MessageKey.GAME_ID_ALREADY_EXISTS
    assert report.first.args == ("valorant",)


def test_unchanged_game_id_is_not_a_collision():
    assert validate_game_id("apex", "apex", EXISTING).ok


@pytest.mark.parametrize("platform,field,key", [
    ("steam", Field.STEAM_APP_ID, MessageKey.STEAM_APP_ID_REQUIRED),
    ("epic", Field.EPIC_GAME_ID, MessageKey.EPIC_GAME_ID_REQUIRED),
    ("riot", Field.RIOT_GAME_ID, MessageKey.RIOT_GAME_ID_REQUIRED),
    ("direct", Field.EXECUTABLE_PATH, MessageKey.EXECUTABLE_PATH_REQUIRED),
])
def test_platform_required_field(platform, field, key):
    report = validate_game(GameCandidate("new", platform), None, EXISTING)

    assert [(e.field, e.key) for e in report.errors] == [(field, key)]


def test_only_the_selected_platform_field_is_required():
    candidate = GameCandidate("new", "riot", riot_game_id="valorant")

    assert validate_game(candidate, None, EXISTING).ok


def test_ea_has_no_required_field():
    assert validate_game(GameCandidate("new", "ea"), None, EXISTING).ok


def test_unknown_platform():
    report = validate_game(GameCandidate("new", "gog"), None, EXISTING)

    assert report.first.key is MessageKey.INVALID_PLATFORM
    assert report.first.args == ("gog",)


def test_errors_follow_declaration_order():
    report = validate_game(GameCandidate("", "direct"), "apex", EXISTING)

    assert report.fields == [Field.GAME_ID, Field.EXECUTABLE_PATH]
    result = report.to_result()
    assert not result.ok
    assert result.message.key is MessageKey.GAME_ID_CANNOT_BE_EMPTY
    assert result.invalid_fields == [Field.GAME_ID, Field.EXECUTABLE_PATH]


def test_app_id_rules():
    assert validate_app("", "noWinKey", ["noWinKey"]).first.key is MessageKey.APP_ID_CANNOT_BE_EMPTY
    assert validate_app("clibor", "noWinKey", ["noWinKey", "clibor"]).first.key is MessageKey.APP_ID_ALREADY_EXISTS
    assert validate_app("noWinKey", "noWinKey", ["noWinKey"]).ok
    assert validate_app("fresh", None, ["noWinKey"]).ok


@pytest.mark.parametrize("new_id", ["_apex", "_order", "_"])
def test_underscore_ids_are_reserved(new_id):
    game = validate_game(GameCandidate(new_id, "ea"), "apex", EXISTING)
    app = validate_app(new_id, "noWinKey", ["noWinKey"])

    assert game.first.key is MessageKey.GAME_ID_INVALID
    assert game.first.args == (new_id,)
    assert validate_game_id(new_id, "apex", EXISTING).first.key is MessageKey.GAME_ID_INVALID
    assert app.first.key is MessageKey.APP_ID_INVALID
    assert app.fields == [Field.APP_ID]


def test_inner_underscore_is_allowed():
    assert validate_game_id("apex_copy", "apex", EXISTING).ok
    assert validate_app("no_win_key", None, ["noWinKey"]).ok
