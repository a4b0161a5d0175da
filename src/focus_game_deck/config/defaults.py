"""Built-in sample configuration written when no configuration file exists"""

from .paths import AppPaths
from .schema import (
    ActionVerb,
    AppEntry,
    ConfigurationDocument,
    GameEntry,
    GameIntegrations,
    ObsGameSettings,
    OrderedCollection,
    Platform,
    PlatformPaths,
    TerminationMethod,
)


def _sample_apps() -> OrderedCollection[AppEntry]:
    apps: OrderedCollection[AppEntry] = OrderedCollection()
    apps.add("noWinKey", AppEntry(
        display_name="NoWinKey",
        comment="Disables the Windows key while playing",
        path="C:/Apps/NoWinKey/NoWinKey.exe",
        process_names=["NoWinKey"],
        game_start_action=ActionVerb.START_PROCESS,
        game_end_action=ActionVerb.STOP_PROCESS,
        termination_method=TerminationMethod.AUTO,
    ))
    apps.add("autoHotkey", AppEntry(
        display_name="AutoHotkey",
        comment="Stops desktop macros during a game and restores them afterwards",
        process_names=["AutoHotkeyU64", "AutoHotkey"],
        game_start_action=ActionVerb.STOP_PROCESS,
        game_end_action=ActionVerb.START_PROCESS,
        termination_method=TerminationMethod.GRACEFUL,
    ))
    apps.add("clibor", AppEntry(
        display_name="Clibor",
        comment="Clipboard manager whose hotkeys clash with games",
        path="C:/Apps/clibor/Clibor.exe",
        process_names=["Clibor"],
        game_start_action=ActionVerb.TOGGLE_HOTKEYS,
        game_end_action=ActionVerb.TOGGLE_HOTKEYS,
    ))
    apps.add("wallpaperEngine", AppEntry(
        display_name="Wallpaper Engine",
        process_names=["wallpaper64", "wallpaper32"],
        game_start_action=ActionVerb.PAUSE_WALLPAPER,
        game_end_action=ActionVerb.PLAY_WALLPAPER,
    ))
    apps.add("discord", AppEntry(
        display_name="Discord",
        process_names=["Discord"],
        game_start_action=ActionVerb.ENTER_GAME_MODE,
        game_end_action=ActionVerb.EXIT_GAME_MODE,
    ))
    return apps


def _sample_games() -> OrderedCollection[GameEntry]:
    games: OrderedCollection[GameEntry] = OrderedCollection()
    games.add("apex", GameEntry(
        name="Apex Legends",
        platform=Platform.STEAM,
        steam_app_id="1172470",
        process_name="r5apex*",
        apps_to_manage=["noWinKey", "autoHotkey", "discord"],
        integrations=GameIntegrations(
            use_obs=True,
            use_discord=True,
            obs_settings=ObsGameSettings(enable_replay_buffer=True),
        ),
    ))
    games.add("valorant", GameEntry(
        name="VALORANT",
        platform=Platform.RIOT,
        riot_game_id="valorant",
        process_name="VALORANT-Win64-Shipping*",
        apps_to_manage=["noWinKey", "clibor"],
        integrations=GameIntegrations(use_discord=True),
    ))
    games.add("fallguys", GameEntry(
        name="Fall Guys",
        platform=Platform.EPIC,
        epic_game_id="0a2d9f6403244d12969e11da6713137b",
        process_name="FallGuys_client*",
        apps_to_manage=["wallpaperEngine"],
    ))
    games.add("genshin", GameEntry(
        name="Genshin Impact",
        platform=Platform.DIRECT,
        executable_path="C:/Program Files/Genshin Impact/Genshin Impact game/GenshinImpact.exe",
        process_name="GenshinImpact*",
        comment="Started directly, not through a launcher",
        apps_to_manage=["clibor", "wallpaperEngine"],
    ))
    return games


def build_default_document() -> ConfigurationDocument:
    """Create the sample document offered on first run.

    Returns:
        A new ConfigurationDocument with example games and managed apps
    """
    return ConfigurationDocument(
        managed_apps=_sample_apps(),
        games=_sample_games(),
        paths=PlatformPaths(
            steam=AppPaths.STEAM_DEFAULT,
            epic=AppPaths.EPIC_DEFAULT,
            riot=AppPaths.RIOT_DEFAULT,
            obs=AppPaths.OBS_DEFAULT,
        ),
    )
