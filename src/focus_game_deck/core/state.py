"""Editor session state and rename-safe mutations of the configuration.

StateManager is the only owner of the ConfigurationDocument. Everything the
editor remembers between UI events (document, selection, modified flag)
lives in one EditorSession object so the logic can be tested without a UI.
"""

import copy
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from ..config.manager import ConfigurationManager, serialize_document
from ..config.schema import AppEntry, ConfigurationDocument, GameEntry, Platform
from ..logging_config import get_logger
from .messages import Message, MessageKey, OperationResult
from .validation import validate_app, validate_game_id

logger = get_logger("state")


@dataclass
class EditorSession:
    """Mutable state of one editing session"""
    config_path: Path
    document: Optional[ConfigurationDocument] = None
    modified: bool = False
    selected_game_id: Optional[str] = None
    selected_app_id: Optional[str] = None
    baseline_snapshot: str = ""
    load_error: Optional[Message] = None
    created_on_load: bool = False


class StateManager:
    """Loads, mutates and saves the configuration document.

    Mutating methods return an OperationResult and never raise: rejected
    input leaves the document untouched, and an unexpected error is logged
    and rolled back.
    """

    def __init__(
        self,
        config_path: Optional[Path] = None,
        config_manager: Optional[ConfigurationManager] = None,
    ):
        self.config_manager = config_manager or ConfigurationManager(config_path)
        self.session = EditorSession(config_path=self.config_manager.config_path)

    @property
    def document(self) -> ConfigurationDocument:
        return self.get_or_create_default()

    # -- lifecycle -----------------------------------------------------------

    def load(self) -> OperationResult:
        """Load the configuration file, creating or falling back as needed.

        - existing file: parsed, order-lists repaired
        - missing file: sample document created and written to disk
        - unreadable file: error recorded, sample document kept in memory
          only, the file on disk is left alone

        Returns:
            Success (with CONFIG_CREATED when a file was written) or a
            failure carrying CONFIG_LOAD_FAILED; the session is usable
            either way
        """
        session = self.session
        session.load_error = None
        session.created_on_load = False
        path = self.config_manager.config_path
        result = OperationResult.success()

        if not self.config_manager.exists():
            logger.info(f"No configuration at {path}, creating the sample configuration")
            document = self.config_manager.create_default()
            session.created_on_load = True
            try:
                self.config_manager.save(document)
                result = OperationResult.success(Message.of(MessageKey.CONFIG_CREATED, str(path)))
            except OSError as e:
                logger.error(f"Could not write the sample configuration to {path}: {e}")
                result = OperationResult.failure(MessageKey.CONFIG_SAVE_FAILED, str(path), str(e))
        else:
            try:
                document = self.config_manager.load()
            except Exception as e:
                # Any unreadable document falls back to the sample, never a crash
                logger.exception(f"Failed to load configuration from {path}: {e}")
                document = self.config_manager.create_default()
                session.load_error = Message.of(MessageKey.CONFIG_LOAD_FAILED, str(path), str(e))
                result = OperationResult(ok=False, message=session.load_error)

        self._reset_session(document)
        return result

    def get_or_create_default(self) -> ConfigurationDocument:
        """Return the current document, creating the in-memory sample if none is loaded."""
        if self.session.document is None:
            self._reset_session(self.config_manager.create_default())
        return self.session.document

    def save(self) -> OperationResult:
        """Write the document to the configuration file and clear the modified flag."""
        document = self.get_or_create_default()
        path = self.config_manager.config_path
        try:
            self.config_manager.save(document)
        except OSError as e:
            logger.error(f"Failed to save configuration to {path}: {e}")
            return OperationResult.failure(MessageKey.CONFIG_SAVE_FAILED, str(path), str(e))

        self.clear_modified()
        self.session.baseline_snapshot = self.snapshot_for_comparison()
        self.session.load_error = None
        logger.info(f"Configuration saved to {path}")
        return OperationResult.success(Message.of(MessageKey.CONFIG_SAVED, str(path)))

    def _reset_session(self, document: ConfigurationDocument) -> None:
        session = self.session
        session.document = document
        session.modified = False
        session.selected_game_id = next(iter(document.games), None)
        session.selected_app_id = next(iter(document.managed_apps), None)
        session.baseline_snapshot = serialize_document(document)

    # -- modified flag -------------------------------------------------------

    def mark_modified(self) -> None:
        self.session.modified = True

    def clear_modified(self) -> None:
        self.session.modified = False

    def is_modified(self) -> bool:
        return self.session.modified

    def snapshot_for_comparison(self) -> str:
        """The document exactly as it would be written now."""
        return serialize_document(self.get_or_create_default())

    def has_unsaved_changes(self) -> bool:
        """True if the document differs from what was last loaded or saved."""
        return self.snapshot_for_comparison() != self.session.baseline_snapshot

    # -- guarded execution ---------------------------------------------------

    def run_guarded(self, operation: str, action: Callable[[], OperationResult]) -> OperationResult:
        """Run a mutation, restoring the session if it fails unexpectedly.

        Args:
            operation: Short description used in the log
            action: The mutation; returns its own result

        Returns:
            The action's result, or UNEXPECTED_ERROR after a rollback
        """
        session = self.session
        saved = (
            copy.deepcopy(self.get_or_create_default()),
            session.modified,
            session.selected_game_id,
            session.selected_app_id,
        )
        try:
            return action()
        except Exception as e:
            logger.exception(f"Unexpected error during {operation}; changes rolled back")
            session.document, session.modified, session.selected_game_id, session.selected_app_id = saved
            return OperationResult.failure(MessageKey.UNEXPECTED_ERROR, operation, str(e))

    # -- selection -----------------------------------------------------------

    def select_game(self, game_id: Optional[str]) -> bool:
        if game_id is not None and game_id not in self.document.games:
            return False
        self.session.selected_game_id = game_id
        return True

    def select_app(self, app_id: Optional[str]) -> bool:
        if app_id is not None and app_id not in self.document.managed_apps:
            return False
        self.session.selected_app_id = app_id
        return True

    def selected_game(self) -> Optional[GameEntry]:
        game_id = self.session.selected_game_id
        return self.document.games.get(game_id) if game_id else None

    def selected_app(self) -> Optional[AppEntry]:
        app_id = self.session.selected_app_id
        return self.document.managed_apps.get(app_id) if app_id else None

    # -- games ---------------------------------------------------------------

    def add_game(self, game_id: Optional[str] = None, entry: Optional[GameEntry] = None) -> OperationResult:
        """Append a game and select it.

        Args:
            game_id: ID to use; a fresh "newGame" ID when None
            entry: Initial values; a blank Steam game when None

        Returns:
            Success with entity_id set to the new ID
        """
        def action() -> OperationResult:
            games = self.document.games
            new_id = game_id if game_id is not None else games.unique_key("newGame")
            report = validate_game_id(new_id, None, games.keys())
            if not report.ok:
                return report.to_result()

            games.add(new_id, entry if entry is not None else GameEntry(name="New Game", platform=Platform.STEAM))
            self.session.selected_game_id = new_id
            self.mark_modified()
            logger.debug(f"Added game {new_id}")
            return OperationResult.success(entity_id=new_id)

        return self.run_guarded("add game", action)

    def duplicate_game(self, game_id: str) -> OperationResult:
        """Copy a game under a fresh ID placed right after the original."""
        def action() -> OperationResult:
            games = self.document.games
            source = games.get(game_id)
            if source is None:
                return OperationResult.failure(MessageKey.GAME_NOT_FOUND, game_id)

            new_id = games.unique_key(f"{game_id}_copy")
            games.add(new_id, copy.deepcopy(source), after=game_id)
            self.session.selected_game_id = new_id
            self.mark_modified()
            logger.debug(f"Duplicated game {game_id} as {new_id}")
            return OperationResult.success(entity_id=new_id)

        return self.run_guarded("duplicate game", action)

    def delete_game(self, game_id: str) -> OperationResult:
        """Remove a game from the map and the order-list."""
        def action() -> OperationResult:
            games = self.document.games
            if game_id not in games:
                return OperationResult.failure(MessageKey.GAME_NOT_FOUND, game_id)

            index = games.order.index(game_id)
            games.remove(game_id)
            if self.session.selected_game_id == game_id:
                # Select the neighbour that moved into the deleted slot
                remaining = games.keys()
                self.session.selected_game_id = remaining[min(index, len(remaining) - 1)] if remaining else None
            self.mark_modified()
            logger.debug(f"Deleted game {game_id}")
            return OperationResult.success(entity_id=game_id)

        return self.run_guarded("delete game", action)

    def rename_game(self, old_id: str, new_id: str) -> OperationResult:
        """Change a game's ID, keeping its position in the order-list.

        Every check happens before the first mutation, so a rejected rename
        leaves the document unchanged.
        """
        def action() -> OperationResult:
            games = self.document.games
            if old_id not in games:
                return OperationResult.failure(MessageKey.GAME_NOT_FOUND, old_id)
            report = validate_game_id(new_id, old_id, games.keys())
            if not report.ok:
                return report.to_result()
            if new_id == old_id:
                return OperationResult.success(entity_id=new_id)

            games.rekey(old_id, new_id)
            if self.session.selected_game_id == old_id:
                self.session.selected_game_id = new_id
            self.mark_modified()
            logger.info(f"Renamed game {old_id} to {new_id}")
            return OperationResult.success(entity_id=new_id)

        return self.run_guarded("rename game", action)

    def move_game(self, game_id: str, offset: int) -> OperationResult:
        """Move a game up (negative offset) or down in the order-list."""
        def action() -> OperationResult:
            games = self.document.games
            if game_id not in games:
                return OperationResult.failure(MessageKey.GAME_NOT_FOUND, game_id)
            if games.move(game_id, offset):
                self.mark_modified()
            return OperationResult.success(entity_id=game_id)

        return self.run_guarded("move game", action)

    # -- managed apps --------------------------------------------------------

    def add_app(self, app_id: Optional[str] = None, entry: Optional[AppEntry] = None) -> OperationResult:
        """Append a managed app and select it.

        Args:
            app_id: ID to use; a fresh "newApp" ID when None
            entry: Initial values; a blank app when None

        Returns:
            Success with entity_id set to the new ID
        """
        def action() -> OperationResult:
            apps = self.document.managed_apps
            new_id = app_id if app_id is not None else apps.unique_key("newApp")
            report = validate_app(new_id, None, apps.keys())
            if not report.ok:
                return report.to_result()

            apps.add(new_id, entry if entry is not None else AppEntry(display_name="New App"))
            self.session.selected_app_id = new_id
            self.mark_modified()
            logger.debug(f"Added managed app {new_id}")
            return OperationResult.success(entity_id=new_id)

        return self.run_guarded("add app", action)

    def delete_app(self, app_id: str) -> OperationResult:
        """Remove a managed app and every reference to it from the games."""
        def action() -> OperationResult:
            document = self.document
            apps = document.managed_apps
            if app_id not in apps:
                return OperationResult.failure(MessageKey.APP_NOT_FOUND, app_id)

            index = apps.order.index(app_id)
            apps.remove(app_id)
            for game_id in document.games_referencing(app_id):
                game = document.games.get(game_id)
                game.apps_to_manage[:] = [ref for ref in game.apps_to_manage if ref != app_id]
                logger.debug(f"Removed {app_id} from appsToManage of {game_id}")

            if self.session.selected_app_id == app_id:
                remaining = apps.keys()
                self.session.selected_app_id = remaining[min(index, len(remaining) - 1)] if remaining else None
            self.mark_modified()
            logger.debug(f"Deleted managed app {app_id}")
            return OperationResult.success(entity_id=app_id)

        return self.run_guarded("delete app", action)

    def rename_app(self, old_id: str, new_id: str) -> OperationResult:
        """Change a managed app's ID and rewrite every game reference to it.

        References keep their position and multiplicity in each game's
        appsToManage list.
        """
        def action() -> OperationResult:
            document = self.document
            apps = document.managed_apps
            if old_id not in apps:
                return OperationResult.failure(MessageKey.APP_NOT_FOUND, old_id)
            report = validate_app(new_id, old_id, apps.keys())
            if not report.ok:
                return report.to_result()
            if new_id == old_id:
                return OperationResult.success(entity_id=new_id)

            apps.rekey(old_id, new_id)
            for game_id in document.games_referencing(old_id):
                game = document.games.get(game_id)
                game.apps_to_manage[:] = [new_id if ref == old_id else ref for ref in game.apps_to_manage]
                logger.debug(f"Updated appsToManage of {game_id}: {old_id} -> {new_id}")

            if self.session.selected_app_id == old_id:
                self.session.selected_app_id = new_id
            self.mark_modified()
            logger.info(f"Renamed managed app {old_id} to {new_id}")
            return OperationResult.success(entity_id=new_id)

        return self.run_guarded("rename app", action)

    def move_app(self, app_id: str, offset: int) -> OperationResult:
        """Move a managed app up (negative offset) or down in the order-list."""
        def action() -> OperationResult:
            apps = self.document.managed_apps
            if app_id not in apps:
                return OperationResult.failure(MessageKey.APP_NOT_FOUND, app_id)
            if apps.move(app_id, offset):
                self.mark_modified()
            return OperationResult.success(entity_id=app_id)

        return self.run_guarded("move app", action)
