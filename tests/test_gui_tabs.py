"""Tests for the tab classes that need no display"""

import inspect

import pytest

pytest.importorskip("customtkinter")

from focus_game_deck.gui.apps_tab import AppsTab  # noqa: E402
from focus_game_deck.gui.entity_tab import EntityTab  # noqa: E402
from focus_game_deck.gui.games_tab import GamesTab  # noqa: E402


def test_entity_tab_hooks_must_be_overridden():
    assert inspect.isabstract(EntityTab)
    assert {"create_form", "list_items", "add", "delete", "move", "apply"} <= EntityTab.__abstractmethods__


@pytest.mark.parametrize("tab_class", [GamesTab, AppsTab])
def test_concrete_tabs_implement_every_hook(tab_class):
    assert not inspect.isabstract(tab_class)


def test_only_games_can_be_duplicated():
    assert GamesTab.allow_duplicate
    assert not AppsTab.allow_duplicate
    assert "duplicate" in vars(GamesTab)
