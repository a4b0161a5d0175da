"""Configuration document data models.

Every section of the JSON document is a dataclass whose defaults describe a
missing section, so older documents load by addition rather than rejection.
Keys a model does not know about are kept in ``extra`` and written back
unchanged.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

from ..logging_config import get_logger

logger = get_logger("schema")

# Metadata key holding the display order of an ordered collection
ORDER_KEY = "_order"
# Keys of an ordered collection starting with this are metadata, never entries
METADATA_PREFIX = "_"

DEFAULT_GRACEFUL_TIMEOUT_MS = 3000
DEFAULT_OBS_PORT = 4455
DEFAULT_VTUBE_STUDIO_PORT = 8001
DEFAULT_LOG_RETENTION_DAYS = 90


class Platform(Enum):
    """Launcher platform a game is started through"""
    STEAM = "steam"
    EPIC = "epic"
    EA = "ea"
    RIOT = "riot"
    DIRECT = "direct"

    @property
    def identifier_attr(self) -> Optional[str]:
        """Name of the GameEntry attribute that identifies the game on this platform."""
        return _PLATFORM_IDENTIFIERS.get(self)


_PLATFORM_IDENTIFIERS = {
    Platform.STEAM: "steam_app_id",
    Platform.EPIC: "epic_game_id",
    Platform.RIOT: "riot_game_id",
    Platform.DIRECT: "executable_path",
}


class ActionVerb(Enum):
    """Lifecycle action taken on a managed app when a game starts or ends"""
    NONE = "none"
    START_PROCESS = "start-process"
    STOP_PROCESS = "stop-process"
    TOGGLE_HOTKEYS = "toggle-hotkeys"
    ENTER_GAME_MODE = "enter-game-mode"
    EXIT_GAME_MODE = "exit-game-mode"
    PAUSE_WALLPAPER = "pause-wallpaper"
    PLAY_WALLPAPER = "play-wallpaper"


class TerminationMethod(Enum):
    """How a managed process is stopped"""
    AUTO = "auto"
    GRACEFUL = "graceful"
    FORCE = "force"


EnumT = TypeVar("EnumT", bound=Enum)
EntryT = TypeVar("EntryT")


def parse_enum(enum_cls: type[EnumT], value: Any, default: EnumT) -> EnumT:
    """Convert a raw value to an enum member, falling back to a default."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        logger.warning(f"Unknown {enum_cls.__name__} value {value!r}, using {default.value!r}")
        return default


def _get_str(data: dict, key: str, default: str = "") -> str:
    value = data.get(key)
    if value is None:
        return default
    return str(value)


def _get_optional_str(data: dict, key: str) -> Optional[str]:
    value = data.get(key)
    if value is None or value == "":
        return None
    return str(value)


def _get_bool(data: dict, key: str, default: bool = False) -> bool:
    value = data.get(key)
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return default


def _get_int(data: dict, key: str, default: int) -> int:
    value = data.get(key)
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


def _get_str_list(data: dict, key: str) -> list[str]:
    value = data.get(key)
    if isinstance(value, str):
        return [value] if value else []
    if isinstance(value, list):
        return [str(item) for item in value if item is not None and item != ""]
    return []


def _get_section(data: dict, key: str) -> dict:
    value = data.get(key)
    return value if isinstance(value, dict) else {}


def _extra(data: dict, known: frozenset) -> dict[str, Any]:
    return {k: v for k, v in data.items() if k not in known}


# ---------------------------------------------------------------------------
# Ordered collections
# ---------------------------------------------------------------------------

class OrderedCollection(Generic[EntryT]):
    """Keyed entries plus an explicit order-list.

    Persisted as a JSON object whose ``_order`` key is the order-list; other
    keys starting with an underscore are metadata and never entries. The
    order-list is kept a permutation of the entry keys by every mutator here;
    ``initialize_order`` repairs documents that break it.
    """

    def __init__(
        self,
        entries: Optional[dict[str, EntryT]] = None,
        order: Optional[list[str]] = None,
        metadata: Optional[dict[str, Any]] = None,
    ):
        self.entries: dict[str, EntryT] = dict(entries or {})
        self.order: list[str] = list(order) if order is not None else list(self.entries)
        self.metadata: dict[str, Any] = dict(metadata or {})

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self.order))

    def get(self, key: str) -> Optional[EntryT]:
        return self.entries.get(key)

    def items(self) -> list[tuple[str, EntryT]]:
        """Entries as (key, entry) pairs in display order."""
        return [(key, self.entries[key]) for key in self.order if key in self.entries]

    def keys(self) -> list[str]:
        return list(self.order)

    def initialize_order(self) -> bool:
        """Make the order-list a permutation of exactly the entry keys.

        Stale and duplicate order entries are dropped; keys missing from the
        order-list are appended in map order.

        Returns:
            True if the order-list had to be repaired
        """
        repaired: list[str] = []
        seen: set[str] = set()
        for key in self.order:
            if key in self.entries and key not in seen:
                repaired.append(key)
                seen.add(key)
        for key in self.entries:
            if key not in seen:
                repaired.append(key)
                seen.add(key)

        changed = repaired != self.order
        self.order = repaired
        return changed

    def add(self, key: str, entry: EntryT, after: Optional[str] = None) -> None:
        """Insert a new entry into the collection.

        Args:
            key: Key of the new entry
            entry: The entry
            after: Place the entry right after this key; at the end if None or unknown

        Raises:
            KeyError: If the key is already present
        """
        if key in self.entries:
            raise KeyError(key)
        self.entries[key] = entry
        if after is not None and after in self.order:
            self.order.insert(self.order.index(after) + 1, key)
        else:
            self.order.append(key)

    def remove(self, key: str) -> EntryT:
        """Remove an entry and its order-list position.

        Raises:
            KeyError: If the key is not present
        """
        entry = self.entries.pop(key)
        self.order = [k for k in self.order if k != key]
        return entry

    def rekey(self, old_key: str, new_key: str) -> None:
        """Move an entry to a new key, keeping its order-list position.

        Raises:
            KeyError: If old_key is missing or new_key is taken
        """
        if old_key not in self.entries:
            raise KeyError(old_key)
        if new_key in self.entries:
            raise KeyError(new_key)
        self.entries[new_key] = self.entries.pop(old_key)
        self.order = [new_key if k == old_key else k for k in self.order]

    def move(self, key: str, offset: int) -> bool:
        """Shift an entry within the order-list, clamped at either end.

        Returns:
            True if the position changed
        """
        if key not in self.order:
            return False
        index = self.order.index(key)
        target = max(0, min(len(self.order) - 1, index + offset))
        if target == index:
            return False
        self.order.insert(target, self.order.pop(index))
        return True

    def unique_key(self, base: str) -> str:
        """Return base, or base followed by the lowest free counter."""
        if base not in self.entries:
            return base
        counter = 1
        while f"{base}{counter}" in self.entries:
            counter += 1
        return f"{base}{counter}"

    @classmethod
    def from_dict(
        cls, data: Any, entry_factory: Callable[[dict], EntryT]
    ) -> "OrderedCollection[EntryT]":
        """Build a collection from its JSON object form.

        The order-list is taken as-is; call ``initialize_order`` to repair it.
        """
        if not isinstance(data, dict):
            return cls()

        raw_order = data.get(ORDER_KEY)
        order = [str(k) for k in raw_order] if isinstance(raw_order, list) else None

        entries: dict[str, EntryT] = {}
        metadata: dict[str, Any] = {}
        for key, value in data.items():
            if key == ORDER_KEY:
                continue
            if key.startswith(METADATA_PREFIX):
                metadata[key] = value
                continue
            if not isinstance(value, dict):
                logger.warning(f"Skipping entry {key!r}: expected an object, got {type(value).__name__}")
                continue
            entries[key] = entry_factory(value)

        return cls(entries=entries, order=order, metadata=metadata)

    def to_dict(self, entry_serializer: Callable[[EntryT], dict]) -> dict[str, Any]:
        """JSON object form: order-list first, then metadata, then entries in order."""
        result: dict[str, Any] = {ORDER_KEY: list(self.order)}
        result.update(self.metadata)
        for key, entry in self.items():
            result[key] = entry_serializer(entry)
        return result


# ---------------------------------------------------------------------------
# Games
# ---------------------------------------------------------------------------

@dataclass
class ObsGameSettings:
    """Per-game OBS behaviour"""
    enable_replay_buffer: bool = True
    target_scene: Optional[str] = None
    enable_rollback: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "ObsGameSettings":
        return cls(
            enable_replay_buffer=_get_bool(data, "enableReplayBuffer", True),
            target_scene=_get_optional_str(data, "targetScene"),
            enable_rollback=_get_bool(data, "enableRollback", False),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"enableReplayBuffer": self.enable_replay_buffer}
        if self.target_scene:
            result["targetScene"] = self.target_scene
        result["enableRollback"] = self.enable_rollback
        return result


@dataclass
class VTubeStudioGameSettings:
    """Per-game VTube Studio model and hotkeys"""
    model_id: Optional[str] = None
    on_launch_hotkeys: list[str] = field(default_factory=list)
    on_exit_hotkeys: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "VTubeStudioGameSettings":
        return cls(
            model_id=_get_optional_str(data, "modelId"),
            on_launch_hotkeys=_get_str_list(data, "onLaunchHotkeys"),
            on_exit_hotkeys=_get_str_list(data, "onExitHotkeys"),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.model_id:
            result["modelId"] = self.model_id
        result["onLaunchHotkeys"] = list(self.on_launch_hotkeys)
        result["onExitHotkeys"] = list(self.on_exit_hotkeys)
        return result


@dataclass
class GameIntegrations:
    """Which integrations a game uses, plus their per-game settings"""
    use_obs: bool = False
    use_discord: bool = False
    use_vtube_studio: bool = False
    obs_settings: Optional[ObsGameSettings] = None
    vtube_studio_settings: Optional[VTubeStudioGameSettings] = None

    def ensure_obs_settings(self) -> ObsGameSettings:
        """Return the OBS settings, creating them with defaults if absent."""
        if self.obs_settings is None:
            self.obs_settings = ObsGameSettings()
        return self.obs_settings

    def ensure_vtube_studio_settings(self) -> VTubeStudioGameSettings:
        """Return the VTube Studio settings, creating them with defaults if absent."""
        if self.vtube_studio_settings is None:
            self.vtube_studio_settings = VTubeStudioGameSettings()
        return self.vtube_studio_settings

    @classmethod
    def from_dict(cls, data: dict) -> "GameIntegrations":
        obs = data.get("obsSettings")
        vts = data.get("vtubeStudioSettings")
        return cls(
            use_obs=_get_bool(data, "useOBS"),
            use_discord=_get_bool(data, "useDiscord"),
            use_vtube_studio=_get_bool(data, "useVTubeStudio"),
            obs_settings=ObsGameSettings.from_dict(obs) if isinstance(obs, dict) else None,
            vtube_studio_settings=VTubeStudioGameSettings.from_dict(vts) if isinstance(vts, dict) else None,
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "useOBS": self.use_obs,
            "useDiscord": self.use_discord,
            "useVTubeStudio": self.use_vtube_studio,
        }
        if self.obs_settings is not None:
            result["obsSettings"] = self.obs_settings.to_dict()
        if self.vtube_studio_settings is not None:
            result["vtubeStudioSettings"] = self.vtube_studio_settings.to_dict()
        return result


_GAME_KEYS = frozenset({
    "name", "platform", "steamAppId", "epicGameId", "riotGameId", "executablePath",
    "processName", "comment", "appsToManage", "integrations",
})


@dataclass
class GameEntry:
    """A game the launcher can start, keyed by its game ID"""
    name: str = ""
    platform: Platform = Platform.STEAM
    steam_app_id: Optional[str] = None
    epic_game_id: Optional[str] = None
    riot_game_id: Optional[str] = None
    executable_path: Optional[str] = None
    process_name: str = ""
    comment: Optional[str] = None
    apps_to_manage: list[str] = field(default_factory=list)
    integrations: GameIntegrations = field(default_factory=GameIntegrations)
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def platform_identifier(self) -> Optional[str]:
        """The identifier relevant to the current platform (None for EA)."""
        attr = self.platform.identifier_attr
        return getattr(self, attr) if attr else None

    def set_platform_identifier(self, value: Optional[str]) -> None:
        """Store the platform's identifier and drop identifiers of other platforms."""
        for attr in _PLATFORM_IDENTIFIERS.values():
            setattr(self, attr, None)
        attr = self.platform.identifier_attr
        if attr:
            setattr(self, attr, value or None)

    @classmethod
    def from_dict(cls, data: dict) -> "GameEntry":
        integrations = data.get("integrations")
        return cls(
            name=_get_str(data, "name"),
            platform=parse_enum(Platform, data.get("platform", "steam"), Platform.STEAM),
            steam_app_id=_get_optional_str(data, "steamAppId"),
            epic_game_id=_get_optional_str(data, "epicGameId"),
            riot_game_id=_get_optional_str(data, "riotGameId"),
            executable_path=_get_optional_str(data, "executablePath"),
            process_name=_get_str(data, "processName"),
            comment=_get_optional_str(data, "comment"),
            apps_to_manage=_get_str_list(data, "appsToManage"),
            integrations=GameIntegrations.from_dict(integrations) if isinstance(integrations, dict) else GameIntegrations(),
            extra=_extra(data, _GAME_KEYS),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"name": self.name, "platform": self.platform.value}
        for key, value in (
            ("steamAppId", self.steam_app_id),
            ("epicGameId", self.epic_game_id),
            ("riotGameId", self.riot_game_id),
            ("executablePath", self.executable_path),
        ):
            if value:
                result[key] = value
        result["processName"] = self.process_name
        if self.comment:
            result["comment"] = self.comment
        result["appsToManage"] = list(self.apps_to_manage)
        result["integrations"] = self.integrations.to_dict()
        result.update(self.extra)
        return result


# ---------------------------------------------------------------------------
# Managed apps
# ---------------------------------------------------------------------------

_APP_KEYS = frozenset({
    "displayName", "comment", "path", "workingDirectory", "processName", "arguments",
    "gameStartAction", "gameEndAction", "terminationMethod", "gracefulTimeoutMs",
})


@dataclass
class AppEntry:
    """A companion application started or stopped around a game session"""
    display_name: str = ""
    comment: Optional[str] = None
    path: Optional[str] = None
    working_directory: Optional[str] = None
    process_names: list[str] = field(default_factory=list)
    arguments: Optional[str] = None
    game_start_action: ActionVerb = ActionVerb.NONE
    game_end_action: ActionVerb = ActionVerb.NONE
    termination_method: TerminationMethod = TerminationMethod.AUTO
    graceful_timeout_ms: int = DEFAULT_GRACEFUL_TIMEOUT_MS
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "AppEntry":
        return cls(
            display_name=_get_str(data, "displayName"),
            comment=_get_optional_str(data, "comment"),
            path=_get_optional_str(data, "path"),
            working_directory=_get_optional_str(data, "workingDirectory"),
            process_names=_get_str_list(data, "processName"),
            arguments=_get_optional_str(data, "arguments"),
            game_start_action=parse_enum(ActionVerb, data.get("gameStartAction", "none"), ActionVerb.NONE),
            game_end_action=parse_enum(ActionVerb, data.get("gameEndAction", "none"), ActionVerb.NONE),
            termination_method=parse_enum(
                TerminationMethod, data.get("terminationMethod", "auto"), TerminationMethod.AUTO
            ),
            graceful_timeout_ms=_get_int(data, "gracefulTimeoutMs", DEFAULT_GRACEFUL_TIMEOUT_MS),
            extra=_extra(data, _APP_KEYS),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"displayName": self.display_name}
        if self.comment:
            result["comment"] = self.comment
        if self.path:
            result["path"] = self.path
        if self.working_directory:
            result["workingDirectory"] = self.working_directory
        # A single matcher is written as a plain string
        if len(self.process_names) == 1:
            result["processName"] = self.process_names[0]
        else:
            result["processName"] = list(self.process_names)
        if self.arguments:
            result["arguments"] = self.arguments
        result["gameStartAction"] = self.game_start_action.value
        result["gameEndAction"] = self.game_end_action.value
        result["terminationMethod"] = self.termination_method.value
        result["gracefulTimeoutMs"] = self.graceful_timeout_ms
        result.update(self.extra)
        return result


# ---------------------------------------------------------------------------
# Integrations, paths, logging
# ---------------------------------------------------------------------------

@dataclass
class ObsIntegration:
    """OBS websocket connection. ``password`` holds the stored (encrypted) form."""
    host: str = "localhost"
    port: int = DEFAULT_OBS_PORT
    password: str = ""
    replay_buffer: bool = True
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "ObsIntegration":
        websocket = _get_section(data, "websocket")
        return cls(
            host=_get_str(websocket, "host", "localhost") or "localhost",
            port=_get_int(websocket, "port", DEFAULT_OBS_PORT),
            password=_get_str(websocket, "password"),
            replay_buffer=_get_bool(data, "replayBuffer", True),
            extra=_extra(data, frozenset({"websocket", "replayBuffer"})),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "websocket": {"host": self.host, "port": self.port, "password": self.password},
            "replayBuffer": self.replay_buffer,
        }
        result.update(self.extra)
        return result


# Older documents used these names for the Discord status mapping
_LEGACY_DISCORD_KEYS = {
    "statusOnStart": "statusOnGameStart",
    "statusOnEnd": "statusOnGameEnd",
}


@dataclass
class DiscordIntegration:
    """Discord game-mode behaviour"""
    enable_game_mode: bool = True
    status_on_game_start: str = "dnd"
    status_on_game_end: str = "online"
    disable_overlay: bool = False
    custom_presence_enabled: bool = False
    custom_presence_state: str = "Focus Gaming Mode"
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "DiscordIntegration":
        data = dict(data)
        for legacy, canonical in _LEGACY_DISCORD_KEYS.items():
            if legacy in data:
                value = data.pop(legacy)
                if canonical not in data:
                    logger.info(f"Migrating Discord setting {legacy} to {canonical}")
                    data[canonical] = value

        presence = _get_section(data, "customPresence")
        return cls(
            enable_game_mode=_get_bool(data, "enableGameMode", True),
            status_on_game_start=_get_str(data, "statusOnGameStart", "dnd") or "dnd",
            status_on_game_end=_get_str(data, "statusOnGameEnd", "online") or "online",
            disable_overlay=_get_bool(data, "disableOverlay", False),
            custom_presence_enabled=_get_bool(presence, "enabled", False),
            custom_presence_state=_get_str(presence, "state", "Focus Gaming Mode"),
            extra=_extra(data, frozenset({
                "enableGameMode", "statusOnGameStart", "statusOnGameEnd", "disableOverlay", "customPresence",
            })),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "enableGameMode": self.enable_game_mode,
            "statusOnGameStart": self.status_on_game_start,
            "statusOnGameEnd": self.status_on_game_end,
            "disableOverlay": self.disable_overlay,
            "customPresence": {
                "enabled": self.custom_presence_enabled,
                "state": self.custom_presence_state,
            },
        }
        result.update(self.extra)
        return result


@dataclass
class VTubeStudioIntegration:
    """VTube Studio plugin connection. ``auth_token`` holds the stored (encrypted) form."""
    host: str = "localhost"
    port: int = DEFAULT_VTUBE_STUDIO_PORT
    auth_token: str = ""
    auto_launch: bool = False
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "VTubeStudioIntegration":
        websocket = _get_section(data, "websocket")
        return cls(
            host=_get_str(websocket, "host", "localhost") or "localhost",
            port=_get_int(websocket, "port", DEFAULT_VTUBE_STUDIO_PORT),
            auth_token=_get_str(websocket, "authToken"),
            auto_launch=_get_bool(data, "autoLaunch", False),
            extra=_extra(data, frozenset({"websocket", "autoLaunch"})),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "websocket": {"host": self.host, "port": self.port, "authToken": self.auth_token},
            "autoLaunch": self.auto_launch,
        }
        result.update(self.extra)
        return result


@dataclass
class Integrations:
    """Global settings for every integration"""
    obs: ObsIntegration = field(default_factory=ObsIntegration)
    discord: DiscordIntegration = field(default_factory=DiscordIntegration)
    vtube_studio: VTubeStudioIntegration = field(default_factory=VTubeStudioIntegration)
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "Integrations":
        return cls(
            obs=ObsIntegration.from_dict(_get_section(data, "obs")),
            discord=DiscordIntegration.from_dict(_get_section(data, "discord")),
            vtube_studio=VTubeStudioIntegration.from_dict(_get_section(data, "vtubeStudio")),
            extra=_extra(data, frozenset({"obs", "discord", "vtubeStudio"})),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "obs": self.obs.to_dict(),
            "discord": self.discord.to_dict(),
            "vtubeStudio": self.vtube_studio.to_dict(),
        }
        result.update(self.extra)
        return result


@dataclass
class PlatformPaths:
    """Launcher executable locations, stored with forward slashes"""
    steam: str = ""
    epic: str = ""
    riot: str = ""
    obs: str = ""
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "PlatformPaths":
        return cls(
            steam=_get_str(data, "steam"),
            epic=_get_str(data, "epic"),
            riot=_get_str(data, "riot"),
            obs=_get_str(data, "obs"),
            extra=_extra(data, frozenset({"steam", "epic", "riot", "obs"})),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"steam": self.steam, "epic": self.epic, "riot": self.riot, "obs": self.obs}
        result.update(self.extra)
        return result


@dataclass
class LoggingSettings:
    """Launcher log retention and notarization. -1 days keeps logs forever."""
    level: str = "Info"
    enable_file_logging: bool = True
    log_retention_days: int = DEFAULT_LOG_RETENTION_DAYS
    enable_notarization: bool = False
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "LoggingSettings":
        return cls(
            level=_get_str(data, "level", "Info") or "Info",
            enable_file_logging=_get_bool(data, "enableFileLogging", True),
            log_retention_days=_get_int(data, "logRetentionDays", DEFAULT_LOG_RETENTION_DAYS),
            enable_notarization=_get_bool(data, "enableNotarization", False),
            extra=_extra(data, frozenset({"level", "enableFileLogging", "logRetentionDays", "enableNotarization"})),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "level": self.level,
            "enableFileLogging": self.enable_file_logging,
            "logRetentionDays": self.log_retention_days,
            "enableNotarization": self.enable_notarization,
        }
        result.update(self.extra)
        return result


_DOCUMENT_KEYS = frozenset({"language", "integrations", "managedApps", "games", "paths", "logging"})


@dataclass
class ConfigurationDocument:
    """Complete launcher configuration"""
    language: str = ""
    integrations: Integrations = field(default_factory=Integrations)
    managed_apps: OrderedCollection[AppEntry] = field(default_factory=OrderedCollection)
    games: OrderedCollection[GameEntry] = field(default_factory=OrderedCollection)
    paths: PlatformPaths = field(default_factory=PlatformPaths)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    extra: dict[str, Any] = field(default_factory=dict)

    def initialize_order(self) -> bool:
        """Repair the order-list of every ordered collection.

        Returns:
            True if any order-list changed
        """
        apps_changed = self.managed_apps.initialize_order()
        games_changed = self.games.initialize_order()
        return apps_changed or games_changed

    def games_referencing(self, app_id: str) -> list[str]:
        """IDs of the games whose appsToManage mention an app, in display order."""
        return [game_id for game_id, game in self.games.items() if app_id in game.apps_to_manage]

    @classmethod
    def from_dict(cls, data: dict) -> "ConfigurationDocument":
        return cls(
            language=_get_str(data, "language"),
            integrations=Integrations.from_dict(_get_section(data, "integrations")),
            managed_apps=OrderedCollection.from_dict(data.get("managedApps"), AppEntry.from_dict),
            games=OrderedCollection.from_dict(data.get("games"), GameEntry.from_dict),
            paths=PlatformPaths.from_dict(_get_section(data, "paths")),
            logging=LoggingSettings.from_dict(_get_section(data, "logging")),
            extra=_extra(data, _DOCUMENT_KEYS),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "language": self.language,
            "integrations": self.integrations.to_dict(),
            "managedApps": self.managed_apps.to_dict(AppEntry.to_dict),
            "games": self.games.to_dict(GameEntry.to_dict),
            "paths": self.paths.to_dict(),
            "logging": self.logging.to_dict(),
        }
        result.update(self.extra)
        return result
