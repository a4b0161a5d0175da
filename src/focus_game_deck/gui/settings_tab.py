"""Global settings tab: launcher paths, integrations and logging"""

from typing import Callable

import customtkinter as ctk

from ..core.binding import save_global_settings, settings_to_form
from ..core.form import Field
from ..core.messages import OperationResult
from ..core.state import StateManager
from .form_panel import FormPanel
from .styles import COLORS, PADDING

DISCORD_STATUSES = ["online", "idle", "dnd", "invisible"]
LOG_LEVELS = ["Debug", "Info", "Warning", "Error"]
RETENTION_CHOICES = ["7", "30", "90", "180", "-1"]


class SettingsForm(FormPanel):
    def __init__(self, master, **kwargs):
        super().__init__(master, **kwargs)

        section = self.add_section("General")
        self.add_entry(section, Field.LANGUAGE, "Language (blank = auto):")

        section = self.add_section("Launcher paths")
        self.add_path(section, Field.STEAM_PATH, "Steam:")
        self.add_path(section, Field.EPIC_PATH, "Epic Games:")
        self.add_path(section, Field.RIOT_PATH, "Riot Client:")
        self.add_path(section, Field.OBS_PATH, "OBS Studio:")

        section = self.add_section("OBS")
        self.add_entry(section, Field.OBS_HOST, "Websocket host:")
        self.add_entry(section, Field.OBS_PORT, "Websocket port:")
        self.add_secret(section, Field.OBS_PASSWORD, "Websocket password:")
        self.add_checkbox(section, Field.OBS_GLOBAL_REPLAY_BUFFER, "Replay buffer available")

        section = self.add_section("Discord")
        self.add_checkbox(section, Field.DISCORD_GAME_MODE, "Enable game mode")
        self.add_option(section, Field.DISCORD_STATUS_ON_GAME_START, "Status while playing:", DISCORD_STATUSES)
        self.add_option(section, Field.DISCORD_STATUS_ON_GAME_END, "Status afterwards:", DISCORD_STATUSES)
        self.add_checkbox(section, Field.DISCORD_DISABLE_OVERLAY, "Disable overlay while playing")
        self.add_checkbox(section, Field.DISCORD_CUSTOM_PRESENCE, "Show custom presence")
        self.add_entry(section, Field.DISCORD_PRESENCE_STATE, "Presence text:")

        section = self.add_section("VTube Studio")
        self.add_entry(section, Field.VTS_HOST, "Websocket host:")
        self.add_entry(section, Field.VTS_PORT, "Websocket port:")
        self.add_secret(section, Field.VTS_AUTH_TOKEN, "Plugin token:")
        self.add_checkbox(section, Field.VTS_AUTO_LAUNCH, "Launch VTube Studio automatically")

        section = self.add_section("Logging")
        self.add_option(section, Field.LOG_LEVEL, "Level:", LOG_LEVELS)
        self.add_checkbox(section, Field.LOG_FILE_ENABLED, "Write log files")
        self.add_option(section, Field.LOG_RETENTION_DAYS, "Keep logs (days, -1 = forever):", RETENTION_CHOICES)
        self.add_checkbox(section, Field.LOG_NOTARIZATION, "Notarize log files")


class SettingsTab(ctk.CTkFrame):
    def __init__(
        self,
        master,
        state: StateManager,
        on_result: Callable[[OperationResult], None],
        **kwargs
    ):
        super().__init__(master, fg_color="transparent", **kwargs)
        self.state = state
        self.on_result = on_result

        self.form = SettingsForm(self)
        self.form.pack(fill="both", expand=True)

        apply_btn = ctk.CTkButton(
            self,
            text="Apply settings",
            fg_color=COLORS["success"],
            hover_color=COLORS["success_hover"],
            command=self._on_apply,
        )
        apply_btn.pack(anchor="e", pady=(PADDING["small"], 0))

    def refresh(self):
        self.form.fill_form(settings_to_form(self.state.document))

    def _on_apply(self):
        result = save_global_settings(self.state, self.form.read_form())
        if result.ok:
            # Reload so secret fields show their saved marker again
            self.refresh()
        self.on_result(result)
