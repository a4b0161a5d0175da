"""Default locations for the editor's configuration and log files"""

import os
from pathlib import Path
from typing import Optional


def _default_config_dir() -> Path:
    appdata = os.environ.get("APPDATA")
    if appdata:
        return Path(appdata) / "FocusGameDeck"
    # Non-Windows development machines
    return Path.home() / ".focus_game_deck"


class AppPaths:
    """Default paths for the configuration document and logs.

    The configuration path can be overridden with the FOCUS_GAME_DECK_CONFIG
    environment variable or the --config command line option.
    """

    CONFIG_ENV_VAR = "FOCUS_GAME_DECK_CONFIG"

    CONFIG_DIR = _default_config_dir()
    CONFIG_FILE = CONFIG_DIR / "config.json"
    LOG_FILE = CONFIG_DIR / "focus_game_deck.log"

    # Launcher defaults offered for a freshly created document
    STEAM_DEFAULT = "C:/Program Files (x86)/Steam/steam.exe"
    EPIC_DEFAULT = "C:/Program Files (x86)/Epic Games/Launcher/Portal/Binaries/Win32/EpicGamesLauncher.exe"
    RIOT_DEFAULT = "C:/Riot Games/Riot Client/RiotClientServices.exe"
    OBS_DEFAULT = "C:/Program Files/obs-studio/bin/64bit/obs64.exe"

    @classmethod
    def expand_path(cls, path_str: str) -> Path:
        """Expand environment variables and ~ in a path string.

        Args:
            path_str: Path string potentially containing environment variables

        Returns:
            Path object with expanded variables
        """
        return Path(os.path.expanduser(os.path.expandvars(path_str)))

    @classmethod
    def resolve_config_path(cls, override: Optional[str] = None) -> Path:
        """Pick the configuration file to edit.

        Precedence: explicit override, then the environment variable,
        then the default location.

        Args:
            override: Path given on the command line, if any

        Returns:
            Path of the configuration document
        """
        if override:
            return cls.expand_path(override)
        env_value = os.environ.get(cls.CONFIG_ENV_VAR)
        if env_value:
            return cls.expand_path(env_value)
        return cls.CONFIG_FILE

    @classmethod
    def ensure_config_dir(cls) -> Path:
        """Ensure the configuration directory exists.

        Returns:
            Path to the configuration directory
        """
        cls.CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        return cls.CONFIG_DIR

    @staticmethod
    def ensure_parent_dir(path: Path) -> Path:
        """Create every missing directory above a file path.

        Args:
            path: File whose parent chain should exist

        Returns:
            The parent directory
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        return path.parent
