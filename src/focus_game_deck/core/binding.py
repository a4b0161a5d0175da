"""Form-to-model binding for the game, managed-app and global settings forms.

Each save routine validates first and only then mutates, so a rejected form
leaves the document untouched. Individual values that fail to parse (ports,
timeouts, retention days) fall back to their documented defaults instead of
failing the save.

Storage conventions applied here:
    - path fields use forward slashes
    - optional text cleared in the form is removed from the document
    - secrets follow the typed / saved / cleared rules of resolve_secret_input
    - per-game OBS and VTube Studio settings exist only while their toggle is on
"""

import math
from typing import Optional

from ..config.schema import (
    DEFAULT_GRACEFUL_TIMEOUT_MS,
    DEFAULT_LOG_RETENTION_DAYS,
    DEFAULT_OBS_PORT,
    DEFAULT_VTUBE_STUDIO_PORT,
    ActionVerb,
    AppEntry,
    ConfigurationDocument,
    GameEntry,
    Platform,
    TerminationMethod,
    parse_enum,
)
from ..config.security import SecretInput, resolve_secret_input
from ..logging_config import get_logger
from .form import Field, FormInput
from .messages import Message, MessageKey, OperationResult
from .state import StateManager
from .validation import GameCandidate, validate_app, validate_game

logger = get_logger("binding")

HOTKEY_SEPARATOR = ","
PROCESS_NAME_SEPARATOR = "|"


def normalize_path(value: str) -> str:
    """Store Windows paths with forward slashes."""
    return value.replace("\\", "/")


def _optional(value: str) -> Optional[str]:
    return value if value else None


def parse_timeout_ms(text: str) -> int:
    """Convert a timeout in seconds to milliseconds.

    Blank, non-numeric, negative or out-of-range input gives
    DEFAULT_GRACEFUL_TIMEOUT_MS.
    """
    try:
        seconds = float(text)
    except (TypeError, ValueError):
        logger.debug(f"Invalid graceful timeout {text!r}, using default")
        return DEFAULT_GRACEFUL_TIMEOUT_MS
    milliseconds = seconds * 1000
    # Huge finite input still overflows once scaled
    if not math.isfinite(milliseconds) or milliseconds < 0:
        return DEFAULT_GRACEFUL_TIMEOUT_MS
    return int(round(milliseconds))


def parse_port(text: str, default: int) -> int:
    """TCP port in 1..65535, or the default."""
    try:
        port = int(text)
    except (TypeError, ValueError):
        logger.debug(f"Invalid port {text!r}, using {default}")
        return default
    return port if 0 < port < 65536 else default


def parse_retention_days(text: str) -> int:
    """Positive number of days, or -1 to keep logs forever."""
    try:
        days = int(text)
    except (TypeError, ValueError):
        logger.debug(f"Invalid log retention {text!r}, using default")
        return DEFAULT_LOG_RETENTION_DAYS
    if days == -1 or days > 0:
        return days
    return DEFAULT_LOG_RETENTION_DAYS


def _apply_secret(form: FormInput, name: str, current: str) -> str:
    secret_input = form.secret(name)
    if secret_input is None:
        return current
    return resolve_secret_input(current, secret_input)


# ---------------------------------------------------------------------------
# Games
# ---------------------------------------------------------------------------

def save_game(state: StateManager, form: FormInput) -> OperationResult:
    """Apply the game form to the selected game.

    Args:
        state: Session state; the selected game is edited
        form: Values read from the game form

    Returns:
        Success with entity_id set to the (possibly renamed) game ID, or the
        first validation error with every invalid field listed
    """
    return state.run_guarded("save game", lambda: _save_game(state, form))


def _save_game(state: StateManager, form: FormInput) -> OperationResult:
    original_id = state.session.selected_game_id
    game = state.selected_game()
    if original_id is None or game is None:
        return OperationResult.failure(MessageKey.NO_GAME_SELECTED)

    candidate = GameCandidate(
        game_id=form.text(Field.GAME_ID, original_id),
        platform=form.text(Field.PLATFORM, game.platform.value),
        steam_app_id=form.text(Field.STEAM_APP_ID, game.steam_app_id or ""),
        epic_game_id=form.text(Field.EPIC_GAME_ID, game.epic_game_id or ""),
        riot_game_id=form.text(Field.RIOT_GAME_ID, game.riot_game_id or ""),
        executable_path=normalize_path(form.text(Field.EXECUTABLE_PATH, game.executable_path or "")),
    )
    report = validate_game(candidate, original_id, state.document.games.keys())
    if not report.ok:
        logger.info(f"Game {original_id} not saved, invalid fields: {report.fields}")
        return report.to_result()

    game_id = candidate.game_id
    if game_id != original_id:
        renamed = state.rename_game(original_id, game_id)
        if not renamed:
            return renamed

    game.name = form.text(Field.GAME_NAME, game.name)
    game.platform = Platform(candidate.platform)
    attr = game.platform.identifier_attr
    game.set_platform_identifier(getattr(candidate, attr) if attr else None)
    game.process_name = form.text(Field.PROCESS_NAME, game.process_name)
    game.comment = _optional(form.text(Field.GAME_COMMENT, game.comment or ""))
    game.apps_to_manage[:] = form.items(Field.APPS_TO_MANAGE, game.apps_to_manage)

    _bind_game_integrations(game, form)

    state.mark_modified()
    logger.debug(f"Saved game {game_id}")
    return OperationResult.success(Message.of(MessageKey.GAME_SAVED, game_id), entity_id=game_id)


def _bind_game_integrations(game: GameEntry, form: FormInput) -> None:
    integrations = game.integrations

    integrations.use_obs = form.flag(Field.USE_OBS, integrations.use_obs)
    if integrations.use_obs:
        obs = integrations.ensure_obs_settings()
        obs.enable_replay_buffer = form.flag(Field.OBS_REPLAY_BUFFER, obs.enable_replay_buffer)
        obs.target_scene = _optional(form.text(Field.OBS_TARGET_SCENE, obs.target_scene or ""))
        obs.enable_rollback = form.flag(Field.OBS_ENABLE_ROLLBACK, obs.enable_rollback)
    else:
        integrations.obs_settings = None

    integrations.use_discord = form.flag(Field.USE_DISCORD, integrations.use_discord)

    integrations.use_vtube_studio = form.flag(Field.USE_VTUBE_STUDIO, integrations.use_vtube_studio)
    if integrations.use_vtube_studio:
        vts = integrations.ensure_vtube_studio_settings()
        vts.model_id = _optional(form.text(Field.VTS_MODEL_ID, vts.model_id or ""))
        vts.on_launch_hotkeys = form.items(Field.VTS_LAUNCH_HOTKEYS, vts.on_launch_hotkeys, HOTKEY_SEPARATOR)
        vts.on_exit_hotkeys = form.items(Field.VTS_EXIT_HOTKEYS, vts.on_exit_hotkeys, HOTKEY_SEPARATOR)
    else:
        integrations.vtube_studio_settings = None


def game_to_form(game_id: str, game: GameEntry) -> FormInput:
    """Values to show in the game form for an existing game."""
    integrations = game.integrations
    obs = integrations.obs_settings
    vts = integrations.vtube_studio_settings
    return FormInput({
        Field.GAME_ID: game_id,
        Field.GAME_NAME: game.name,
        Field.PLATFORM: game.platform.value,
        Field.STEAM_APP_ID: game.steam_app_id or "",
        Field.EPIC_GAME_ID: game.epic_game_id or "",
        Field.RIOT_GAME_ID: game.riot_game_id or "",
        Field.EXECUTABLE_PATH: game.executable_path or "",
        Field.PROCESS_NAME: game.process_name,
        Field.GAME_COMMENT: game.comment or "",
        Field.APPS_TO_MANAGE: list(game.apps_to_manage),
        Field.USE_OBS: integrations.use_obs,
        Field.OBS_REPLAY_BUFFER: obs.enable_replay_buffer if obs else True,
        Field.OBS_TARGET_SCENE: (obs.target_scene or "") if obs else "",
        Field.OBS_ENABLE_ROLLBACK: obs.enable_rollback if obs else False,
        Field.USE_DISCORD: integrations.use_discord,
        Field.USE_VTUBE_STUDIO: integrations.use_vtube_studio,
        Field.VTS_MODEL_ID: (vts.model_id or "") if vts else "",
        Field.VTS_LAUNCH_HOTKEYS: HOTKEY_SEPARATOR.join(vts.on_launch_hotkeys) if vts else "",
        Field.VTS_EXIT_HOTKEYS: HOTKEY_SEPARATOR.join(vts.on_exit_hotkeys) if vts else "",
    })


# ---------------------------------------------------------------------------
# Managed apps
# ---------------------------------------------------------------------------

def save_app(state: StateManager, form: FormInput) -> OperationResult:
    """Apply the managed-app form to the selected app.

    Renaming the app rewrites every game's appsToManage reference.

    Args:
        state: Session state; the selected app is edited
        form: Values read from the app form

    Returns:
        Success with entity_id set to the (possibly renamed) app ID, or the
        first validation error
    """
    return state.run_guarded("save app", lambda: _save_app(state, form))


def _save_app(state: StateManager, form: FormInput) -> OperationResult:
    original_id = state.session.selected_app_id
    app = state.selected_app()
    if original_id is None or app is None:
        return OperationResult.failure(MessageKey.NO_APP_SELECTED)

    app_id = form.text(Field.APP_ID, original_id)
    report = validate_app(app_id, original_id, state.document.managed_apps.keys())
    if not report.ok:
        logger.info(f"Managed app {original_id} not saved, invalid fields: {report.fields}")
        return report.to_result()

    if app_id != original_id:
        renamed = state.rename_app(original_id, app_id)
        if not renamed:
            return renamed

    _bind_app_fields(app, app_id, form)

    state.mark_modified()
    logger.debug(f"Saved managed app {app_id}")
    return OperationResult.success(Message.of(MessageKey.APP_SAVED, app_id), entity_id=app_id)


def _bind_app_fields(app: AppEntry, app_id: str, form: FormInput) -> None:
    app.display_name = form.text(Field.APP_DISPLAY_NAME, app.display_name) or app_id
    app.comment = _optional(form.text(Field.APP_COMMENT, app.comment or ""))
    app.path = _optional(normalize_path(form.text(Field.APP_PATH, app.path or "")))
    app.working_directory = _optional(normalize_path(form.text(Field.APP_WORKING_DIRECTORY, app.working_directory or "")))
    app.process_names = form.items(Field.APP_PROCESS_NAME, app.process_names, PROCESS_NAME_SEPARATOR)
    app.arguments = _optional(form.text(Field.APP_ARGUMENTS, app.arguments or ""))
    app.game_start_action = parse_enum(
        ActionVerb, form.text(Field.GAME_START_ACTION, app.game_start_action.value), ActionVerb.NONE
    )
    app.game_end_action = parse_enum(
        ActionVerb, form.text(Field.GAME_END_ACTION, app.game_end_action.value), ActionVerb.NONE
    )
    app.termination_method = parse_enum(
        TerminationMethod, form.text(Field.TERMINATION_METHOD, app.termination_method.value), TerminationMethod.AUTO
    )
    if Field.GRACEFUL_TIMEOUT_SECONDS in form:
        app.graceful_timeout_ms = parse_timeout_ms(form.text(Field.GRACEFUL_TIMEOUT_SECONDS))


def app_to_form(app_id: str, app: AppEntry) -> FormInput:
    """Values to show in the managed-app form for an existing app."""
    return FormInput({
        Field.APP_ID: app_id,
        Field.APP_DISPLAY_NAME: app.display_name,
        Field.APP_COMMENT: app.comment or "",
        Field.APP_PATH: app.path or "",
        Field.APP_WORKING_DIRECTORY: app.working_directory or "",
        Field.APP_PROCESS_NAME: PROCESS_NAME_SEPARATOR.join(app.process_names),
        Field.APP_ARGUMENTS: app.arguments or "",
        Field.GAME_START_ACTION: app.game_start_action.value,
        Field.GAME_END_ACTION: app.game_end_action.value,
        Field.TERMINATION_METHOD: app.termination_method.value,
        Field.GRACEFUL_TIMEOUT_SECONDS: f"{app.graceful_timeout_ms / 1000:g}",
    })


# ---------------------------------------------------------------------------
# Global settings
# ---------------------------------------------------------------------------

def save_global_settings(state: StateManager, form: FormInput) -> OperationResult:
    """Apply the global settings form: paths, integrations, logging, language.

    Args:
        state: Session state
        form: Values read from the settings form

    Returns:
        Success with SETTINGS_SAVED
    """
    return state.run_guarded("save settings", lambda: _save_global_settings(state, form))


def _save_global_settings(state: StateManager, form: FormInput) -> OperationResult:
    document = state.document
    document.language = form.text(Field.LANGUAGE, document.language)

    paths = document.paths
    paths.steam = normalize_path(form.text(Field.STEAM_PATH, paths.steam))
    paths.epic = normalize_path(form.text(Field.EPIC_PATH, paths.epic))
    paths.riot = normalize_path(form.text(Field.RIOT_PATH, paths.riot))
    paths.obs = normalize_path(form.text(Field.OBS_PATH, paths.obs))

    obs = document.integrations.obs
    obs.host = form.text(Field.OBS_HOST, obs.host) or "localhost"
    if Field.OBS_PORT in form:
        obs.port = parse_port(form.text(Field.OBS_PORT), DEFAULT_OBS_PORT)
    obs.password = _apply_secret(form, Field.OBS_PASSWORD, obs.password)
    obs.replay_buffer = form.flag(Field.OBS_GLOBAL_REPLAY_BUFFER, obs.replay_buffer)

    discord = document.integrations.discord
    discord.enable_game_mode = form.flag(Field.DISCORD_GAME_MODE, discord.enable_game_mode)
    discord.status_on_game_start = form.text(Field.DISCORD_STATUS_ON_GAME_START, discord.status_on_game_start) or "dnd"
    discord.status_on_game_end = form.text(Field.DISCORD_STATUS_ON_GAME_END, discord.status_on_game_end) or "online"
    discord.disable_overlay = form.flag(Field.DISCORD_DISABLE_OVERLAY, discord.disable_overlay)
    discord.custom_presence_enabled = form.flag(Field.DISCORD_CUSTOM_PRESENCE, discord.custom_presence_enabled)
    discord.custom_presence_state = form.text(Field.DISCORD_PRESENCE_STATE, discord.custom_presence_state)

    vts = document.integrations.vtube_studio
    vts.host = form.text(Field.VTS_HOST, vts.host) or "localhost"
    if Field.VTS_PORT in form:
        vts.port = parse_port(form.text(Field.VTS_PORT), DEFAULT_VTUBE_STUDIO_PORT)
    vts.auth_token = _apply_secret(form, Field.VTS_AUTH_TOKEN, vts.auth_token)
    vts.auto_launch = form.flag(Field.VTS_AUTO_LAUNCH, vts.auto_launch)

    log_settings = document.logging
    log_settings.level = form.text(Field.LOG_LEVEL, log_settings.level) or "Info"
    log_settings.enable_file_logging = form.flag(Field.LOG_FILE_ENABLED, log_settings.enable_file_logging)
    if Field.LOG_RETENTION_DAYS in form:
        log_settings.log_retention_days = parse_retention_days(form.text(Field.LOG_RETENTION_DAYS))
    log_settings.enable_notarization = form.flag(Field.LOG_NOTARIZATION, log_settings.enable_notarization)

    state.mark_modified()
    logger.debug("Saved global settings")
    return OperationResult.success(Message.of(MessageKey.SETTINGS_SAVED))


def settings_to_form(document: ConfigurationDocument) -> FormInput:
    """Values to show in the global settings form.

    Secret fields are shown blank; their saved marker tells the save
    routine whether a stored secret must be kept.
    """
    obs = document.integrations.obs
    discord = document.integrations.discord
    vts = document.integrations.vtube_studio
    return FormInput({
        Field.LANGUAGE: document.language,
        Field.STEAM_PATH: document.paths.steam,
        Field.EPIC_PATH: document.paths.epic,
        Field.RIOT_PATH: document.paths.riot,
        Field.OBS_PATH: document.paths.obs,
        Field.OBS_HOST: obs.host,
        Field.OBS_PORT: str(obs.port),
        Field.OBS_PASSWORD: SecretInput(value="", saved=bool(obs.password)),
        Field.OBS_GLOBAL_REPLAY_BUFFER: obs.replay_buffer,
        Field.DISCORD_GAME_MODE: discord.enable_game_mode,
        Field.DISCORD_STATUS_ON_GAME_START: discord.status_on_game_start,
        Field.DISCORD_STATUS_ON_GAME_END: discord.status_on_game_end,
        Field.DISCORD_DISABLE_OVERLAY: discord.disable_overlay,
        Field.DISCORD_CUSTOM_PRESENCE: discord.custom_presence_enabled,
        Field.DISCORD_PRESENCE_STATE: discord.custom_presence_state,
        Field.VTS_HOST: vts.host,
        Field.VTS_PORT: str(vts.port),
        Field.VTS_AUTH_TOKEN: SecretInput(value="", saved=bool(vts.auth_token)),
        Field.VTS_AUTO_LAUNCH: vts.auto_launch,
        Field.LOG_LEVEL: document.logging.level,
        Field.LOG_FILE_ENABLED: document.logging.enable_file_logging,
        Field.LOG_RETENTION_DAYS: str(document.logging.log_retention_days),
        Field.LOG_NOTARIZATION: document.logging.enable_notarization,
    })
