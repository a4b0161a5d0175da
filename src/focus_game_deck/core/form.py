"""Plain form input passed from the UI to the save routines.

The UI adapter reads its widgets into a FormInput keyed by the names in
``Field``. The core never touches widgets. A field missing from the form
leaves the corresponding model value unchanged.
"""

from typing import Any, Mapping, Optional

from ..config.security import SecretInput


class Field:
    """Logical names of form fields"""

    # Game form
    GAME_ID = "gameId"
    GAME_NAME = "gameName"
    PLATFORM = "platform"
    STEAM_APP_ID = "steamAppId"
    EPIC_GAME_ID = "epicGameId"
    RIOT_GAME_ID = "riotGameId"
    EXECUTABLE_PATH = "executablePath"
    PROCESS_NAME = "processName"
    GAME_COMMENT = "gameComment"
    APPS_TO_MANAGE = "appsToManage"
    USE_OBS = "useOBS"
    OBS_REPLAY_BUFFER = "obsReplayBuffer"
    OBS_TARGET_SCENE = "obsTargetScene"
    OBS_ENABLE_ROLLBACK = "obsEnableRollback"
    USE_DISCORD = "useDiscord"
    USE_VTUBE_STUDIO = "useVTubeStudio"
    VTS_MODEL_ID = "vtsModelId"
    VTS_LAUNCH_HOTKEYS = "vtsLaunchHotkeys"
    VTS_EXIT_HOTKEYS = "vtsExitHotkeys"

    # Managed app form
    APP_ID = "appId"
    APP_DISPLAY_NAME = "appDisplayName"
    APP_COMMENT = "appComment"
    APP_PATH = "appPath"
    APP_WORKING_DIRECTORY = "appWorkingDirectory"
    APP_PROCESS_NAME = "appProcessName"
    APP_ARGUMENTS = "appArguments"
    GAME_START_ACTION = "gameStartAction"
    GAME_END_ACTION = "gameEndAction"
    TERMINATION_METHOD = "terminationMethod"
    GRACEFUL_TIMEOUT_SECONDS = "gracefulTimeoutSeconds"

    # Global settings form
    LANGUAGE = "language"
    STEAM_PATH = "steamPath"
    EPIC_PATH = "epicPath"
    RIOT_PATH = "riotPath"
    OBS_PATH = "obsPath"
    OBS_HOST = "obsHost"
    OBS_PORT = "obsPort"
    OBS_PASSWORD = "obsPassword"
    OBS_GLOBAL_REPLAY_BUFFER = "obsGlobalReplayBuffer"
    DISCORD_GAME_MODE = "discordGameMode"
    DISCORD_STATUS_ON_GAME_START = "discordStatusOnGameStart"
    DISCORD_STATUS_ON_GAME_END = "discordStatusOnGameEnd"
    DISCORD_DISABLE_OVERLAY = "discordDisableOverlay"
    DISCORD_CUSTOM_PRESENCE = "discordCustomPresence"
    DISCORD_PRESENCE_STATE = "discordPresenceState"
    VTS_HOST = "vtsHost"
    VTS_PORT = "vtsPort"
    VTS_AUTH_TOKEN = "vtsAuthToken"
    VTS_AUTO_LAUNCH = "vtsAutoLaunch"
    LOG_LEVEL = "logLevel"
    LOG_FILE_ENABLED = "logFileEnabled"
    LOG_RETENTION_DAYS = "logRetentionDays"
    LOG_NOTARIZATION = "logNotarization"


class FormInput:
    """Field name to value mapping read from the UI.

    Values are strings, booleans, lists of strings, or SecretInput for
    secret fields.
    """

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self._values: dict[str, Any] = dict(values or {})

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __repr__(self) -> str:
        # Secrets stay out of logs
        shown = {k: ("***" if isinstance(v, SecretInput) else v) for k, v in self._values.items()}
        return f"FormInput({shown!r})"

    def set(self, name: str, value: Any) -> None:
        self._values[name] = value

    def raw(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def text(self, name: str, default: str = "") -> str:
        """Stripped text value, or default when the field is absent."""
        if name not in self._values:
            return default
        value = self._values[name]
        if value is None:
            return ""
        return str(value).strip()

    def flag(self, name: str, default: bool = False) -> bool:
        """Boolean value, or default when the field is absent."""
        if name not in self._values:
            return default
        value = self._values[name]
        if isinstance(value, str):
            return value.strip().lower() in ("1", "true", "yes", "on")
        return bool(value)

    def items(self, name: str, default: Optional[list[str]] = None, separator: str = "|") -> list[str]:
        """List value. Text is split on the separator; blanks are dropped."""
        if name not in self._values:
            return list(default or [])
        value = self._values[name]
        if value is None:
            return []
        if isinstance(value, str):
            parts = value.split(separator)
        else:
            parts = [str(item) for item in value]
        return [part.strip() for part in parts if part and part.strip()]

    def secret(self, name: str) -> Optional[SecretInput]:
        """Secret value with its saved marker, or None when absent."""
        if name not in self._values:
            return None
        value = self._values[name]
        if isinstance(value, SecretInput):
            return value
        return SecretInput(value=str(value or ""), saved=False)
