"""Games tab: list of games and the game form"""

from typing import Optional

import customtkinter as ctk

from ..config.schema import Platform
from ..core.binding import game_to_form, save_game
from ..core.form import Field, FormInput
from ..core.messages import OperationResult
from .entity_tab import EntityTab
from .form_panel import FormPanel
from .styles import FONTS, PADDING

# Identifier entry shown for each platform
_PLATFORM_FIELDS = {
    Platform.STEAM.value: Field.STEAM_APP_ID,
    Platform.EPIC.value: Field.EPIC_GAME_ID,
    Platform.RIOT.value: Field.RIOT_GAME_ID,
    Platform.DIRECT.value: Field.EXECUTABLE_PATH,
}


class GameForm(FormPanel):
    """Form for a single game, including its managed apps and integrations."""

    def __init__(self, master, **kwargs):
        super().__init__(master, **kwargs)
        self.app_vars: dict[str, ctk.BooleanVar] = {}
        self._app_order: list[str] = []
        self._current_apps: list[str] = []

        section = self.add_section("Game")
        self.add_entry(section, Field.GAME_ID, "Game ID:")
        self.add_entry(section, Field.GAME_NAME, "Display name:")
        self.add_option(
            section, Field.PLATFORM, "Platform:", [p.value for p in Platform], command=self._on_platform_change
        )
        self.add_entry(section, Field.STEAM_APP_ID, "Steam AppID:")
        self.add_entry(section, Field.EPIC_GAME_ID, "Epic game ID:")
        self.add_entry(section, Field.RIOT_GAME_ID, "Riot game ID:")
        self.add_path(section, Field.EXECUTABLE_PATH, "Executable:")
        self.add_entry(section, Field.PROCESS_NAME, "Process name:")
        self.add_entry(section, Field.GAME_COMMENT, "Comment:")

        self.apps_section = self.add_section("Managed apps")
        self.apps_frame = ctk.CTkFrame(self.apps_section, fg_color="transparent")
        self.apps_frame.pack(fill="x", padx=PADDING["medium"], pady=(0, PADDING["small"]))

        section = self.add_section("Integrations")
        self.add_checkbox(section, Field.USE_OBS, "Use OBS")
        self.add_checkbox(section, Field.OBS_REPLAY_BUFFER, "    Start replay buffer")
        self.add_entry(section, Field.OBS_TARGET_SCENE, "    Target scene:")
        self.add_checkbox(section, Field.OBS_ENABLE_ROLLBACK, "    Restore previous scene afterwards")
        self.add_checkbox(section, Field.USE_DISCORD, "Use Discord game mode")
        self.add_checkbox(section, Field.USE_VTUBE_STUDIO, "Use VTube Studio")
        self.add_entry(section, Field.VTS_MODEL_ID, "    Model ID:")
        self.add_entry(section, Field.VTS_LAUNCH_HOTKEYS, "    Launch hotkeys:")
        self.add_entry(section, Field.VTS_EXIT_HOTKEYS, "    Exit hotkeys:")

        hint = ctk.CTkLabel(
            section,
            text="Hotkey IDs are comma separated. Settings of a disabled integration are discarded on apply.",
            font=FONTS["small"],
            text_color="gray",
        )
        hint.pack(anchor="w", padx=PADDING["medium"], pady=(0, PADDING["small"]))

    def set_available_apps(self, apps: list[tuple[str, str]]):
        """Rebuild the managed-app checkboxes from (id, display name) pairs."""
        for child in self.apps_frame.winfo_children():
            child.destroy()
        self.app_vars.clear()
        self._app_order = [app_id for app_id, _ in apps]

        for app_id, display_name in apps:
            var = ctk.BooleanVar(value=False)
            ctk.CTkCheckBox(self.apps_frame, text=f"{display_name} ({app_id})", variable=var).pack(anchor="w", pady=1)
            self.app_vars[app_id] = var

    def fill_form(self, form: FormInput):
        super().fill_form(form)
        self._current_apps = form.items(Field.APPS_TO_MANAGE)
        for app_id, var in self.app_vars.items():
            var.set(app_id in self._current_apps)
        self._on_platform_change(form.text(Field.PLATFORM, Platform.STEAM.value))

    def read_form(self) -> FormInput:
        form = super().read_form()
        checked = {app_id for app_id, var in self.app_vars.items() if var.get()}
        # Keep the existing order (and any repeats) of apps that stay selected
        kept = [app_id for app_id in self._current_apps if app_id in checked or app_id not in self.app_vars]
        added = [app_id for app_id in self._app_order if app_id in checked and app_id not in kept]
        form.set(Field.APPS_TO_MANAGE, kept + added)
        return form

    def _on_platform_change(self, platform: str):
        active = _PLATFORM_FIELDS.get(platform)
        for field in _PLATFORM_FIELDS.values():
            state = "normal" if field == active else "disabled"
            if field in self.path_selectors:
                self.path_selectors[field].set_enabled(field == active)
            else:
                self.entry_widgets[field].configure(state=state)


class GamesTab(EntityTab):
    list_title = "Games"
    entity_label = "game"
    allow_duplicate = True

    def create_form(self, master) -> FormPanel:
        return GameForm(master)

    def refresh(self):
        apps = self.state.document.managed_apps.items()
        self.form.set_available_apps([(app_id, app.display_name or app_id) for app_id, app in apps])
        super().refresh()

    def list_items(self) -> list[tuple[str, str]]:
        return [(game_id, game.name or game_id) for game_id, game in self.state.document.games.items()]

    def selected_id(self) -> Optional[str]:
        return self.state.session.selected_game_id

    def select(self, entity_id: Optional[str]) -> bool:
        return self.state.select_game(entity_id)

    def entity_form(self, entity_id: str) -> FormInput:
        return game_to_form(entity_id, self.state.document.games.get(entity_id))

    def add(self) -> OperationResult:
        return self.state.add_game()

    def duplicate(self, entity_id: str) -> OperationResult:
        return self.state.duplicate_game(entity_id)

    def delete(self, entity_id: str) -> OperationResult:
        return self.state.delete_game(entity_id)

    def move(self, entity_id: str, offset: int) -> OperationResult:
        return self.state.move_game(entity_id, offset)

    def apply(self, form: FormInput) -> OperationResult:
        return save_game(self.state, form)
