"""Tests for the configuration document model"""

from focus_game_deck.config.schema import (
    ActionVerb,
    AppEntry,
    ConfigurationDocument,
    DiscordIntegration,
    GameEntry,
    OrderedCollection,
    Platform,
    TerminationMethod,
)


def _collection(keys, order):
    return OrderedCollection(entries={k: GameEntry(name=k) for k in keys}, order=order)


def test_initialize_order_drops_stale_and_appends_missing():
    games = _collection(["apex", "valorant", "genshin"], ["ghost", "valorant", "apex"])

    assert games.initialize_order() is True
    assert games.order == ["valorant", "apex", "genshin"]


def test_initialize_order_removes_duplicates():
    games = _collection(["a", "b"], ["b", "a", "b", "a"])

    games.initialize_order()

    assert games.order == ["b", "a"]


def test_initialize_order_is_permutation_of_keys_for_any_input():
    keys = ["a", "b", "c", "d"]
    for order in ([], ["x", "y"], ["d", "d", "d"], ["c", "a", "zzz", "b", "d"], keys + keys):
        games = _collection(keys, order)
        games.initialize_order()
        assert sorted(games.order) == sorted(keys)
        assert len(games.order) == len(set(games.order))


def test_initialize_order_reports_no_change_for_valid_order():
    games = _collection(["a", "b"], ["b", "a"])

    assert games.initialize_order() is False
    assert games.order == ["b", "a"]


def test_collection_from_dict_treats_underscore_keys_as_metadata():
    data = {
        "_order": ["apex"],
        "_comment": "games list",
        "apex": {"name": "Apex Legends", "platform": "steam", "steamAppId": "1172470"},
    }

    games = OrderedCollection.from_dict(data, GameEntry.from_dict)

    assert list(games.entries) == ["apex"]
    assert games.metadata == {"_comment": "games list"}
    assert games.to_dict(GameEntry.to_dict)["_comment"] == "games list"


def test_collection_without_order_uses_map_order():
    games = OrderedCollection.from_dict({"b": {}, "a": {}}, GameEntry.from_dict)

    assert games.order == ["b", "a"]


def test_collection_to_dict_writes_entries_in_display_order():
    games = _collection(["a", "b", "c"], ["c", "a", "b"])

    data = games.to_dict(GameEntry.to_dict)

    assert list(data) == ["_order", "c", "a", "b"]


def test_rekey_keeps_position():
    games = _collection(["a", "b", "c"], ["a", "b", "c"])

    games.rekey("b", "bee")

    assert games.order == ["a", "bee", "c"]
    assert "b" not in games


def test_add_after_inserts_next_to_key():
    games = _collection(["a", "b"], ["a", "b"])

    games.add("a2", GameEntry(), after="a")

    assert games.order == ["a", "a2", "b"]


def test_move_is_clamped():
    games = _collection(["a", "b", "c"], ["a", "b", "c"])

    assert games.move("a", -1) is False
    assert games.move("a", 5) is True
    assert games.order == ["b", "c", "a"]


def test_unique_key():
    games = _collection(["newGame", "newGame1"], None)

    assert games.unique_key("newGame") == "newGame2"
    assert games.unique_key("other") == "other"


def test_missing_sections_get_defaults():
    document = ConfigurationDocument.from_dict({})

    assert len(document.games) == 0
    assert document.integrations.obs.port == 4455
    assert document.integrations.vtube_studio.port == 8001
    assert document.logging.log_retention_days == 90
    assert document.paths.steam == ""


def test_unknown_keys_survive_round_trip():
    data = {
        "version": "3.0",
        "games": {
            "apex": {"name": "Apex", "platform": "steam", "steamAppId": "1", "launcherTimeout": 30},
        },
        "managedApps": {"tool": {"displayName": "Tool", "customFlag": True}},
    }

    result = ConfigurationDocument.from_dict(data).to_dict()

    assert result["version"] == "3.0"
    assert result["games"]["apex"]["launcherTimeout"] == 30
    assert result["managedApps"]["tool"]["customFlag"] is True


def test_process_name_single_is_string_and_many_is_list():
    assert AppEntry(process_names=["NoWinKey"]).to_dict()["processName"] == "NoWinKey"
    assert AppEntry(process_names=["a", "b"]).to_dict()["processName"] == ["a", "b"]
    assert AppEntry.from_dict({"processName": "Discord"}).process_names == ["Discord"]
    assert AppEntry.from_dict({"processName": ["a", "b"]}).process_names == ["a", "b"]


def test_unknown_enum_values_fall_back():
    app = AppEntry.from_dict({"gameStartAction": "explode", "terminationMethod": "nuke"})

    assert app.game_start_action is ActionVerb.NONE
    assert app.termination_method is TerminationMethod.AUTO


def test_graceful_timeout_invalid_on_disk_uses_default():
    assert AppEntry.from_dict({"gracefulTimeoutMs": "soon"}).graceful_timeout_ms == 3000


def test_discord_legacy_status_keys_are_migrated():
    discord = DiscordIntegration.from_dict({"statusOnStart": "idle", "statusOnEnd": "invisible"})

    assert discord.status_on_game_start == "idle"
    assert discord.status_on_game_end == "invisible"
    data = discord.to_dict()
    assert "statusOnStart" not in data
    assert "statusOnEnd" not in data
    assert data["statusOnGameStart"] == "idle"


def test_discord_canonical_key_wins_over_legacy():
    discord = DiscordIntegration.from_dict({"statusOnStart": "idle", "statusOnGameStart": "dnd"})

    assert discord.status_on_game_start == "dnd"
    assert "statusOnStart" not in discord.extra


def test_set_platform_identifier_drops_other_platforms():
    game = GameEntry(platform=Platform.STEAM, steam_app_id="1", executable_path="C:/x.exe")

    game.platform = Platform.DIRECT
    game.set_platform_identifier("C:/game.exe")

    assert game.executable_path == "C:/game.exe"
    assert game.steam_app_id is None
    assert game.platform_identifier == "C:/game.exe"


def test_ea_has_no_identifier():
    game = GameEntry(platform=Platform.EA, steam_app_id="1")

    game.set_platform_identifier("ignored")

    assert game.platform_identifier is None
    assert game.steam_app_id is None


def test_ensure_settings_creates_parent_chain():
    game = GameEntry()
    assert game.integrations.obs_settings is None

    game.integrations.ensure_obs_settings().target_scene = "Gaming"
    game.integrations.ensure_vtube_studio_settings().model_id = "m1"

    assert game.to_dict()["integrations"]["obsSettings"]["targetScene"] == "Gaming"
    assert game.to_dict()["integrations"]["vtubeStudioSettings"]["modelId"] == "m1"


def test_blank_optional_fields_are_not_written():
    data = GameEntry(name="Apex", comment=None).to_dict()

    assert "comment" not in data
    assert "executablePath" not in data
