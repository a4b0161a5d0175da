"""Main application window with Games, Managed Apps and Settings tabs."""

from tkinter import messagebox
from typing import Optional

import customtkinter as ctk

from .. import __app_name__, __version__
from ..core.messages import Message, OperationResult
from ..core.state import StateManager
from ..logging_config import get_logger
from .apps_tab import AppsTab
from .games_tab import GamesTab
from .settings_tab import SettingsTab
from .strings import tr
from .styles import COLORS, FONTS, PADDING, WINDOW_SIZES

logger = get_logger("main_window")


class MainWindow(ctk.CTk):
    """Main editor window.

    Layout:
    - Tabs: Games, Managed Apps, Settings
    - Bottom bar: status text, unsaved-changes marker, Save button
    """

    def __init__(self, state: StateManager):
        super().__init__()

        self.state = state

        # Window setup
        self.title(f"{__app_name__} Editor v{__version__}")
        width, height = WINDOW_SIZES["main"]
        min_width, min_height = WINDOW_SIZES["min_main"]
        self.geometry(f"{width}x{height}")
        self.minsize(min_width, min_height)

        self._create_ui()
        self._refresh_ui()

        self.protocol("WM_DELETE_WINDOW", self._on_close)
        self.bind("<Control-s>", lambda event: self._on_save())

    def _create_ui(self):
        """Create the tabs and the status bar."""
        self.tabview = ctk.CTkTabview(self, command=self._on_tab_changed)
        self.tabview.pack(fill="both", expand=True, padx=PADDING["large"], pady=(PADDING["medium"], 0))

        self.games_tab = GamesTab(self.tabview.add("Games"), self.state, self._on_result)
        self.games_tab.pack(fill="both", expand=True)

        self.apps_tab = AppsTab(self.tabview.add("Managed Apps"), self.state, self._on_result)
        self.apps_tab.pack(fill="both", expand=True)

        self.settings_tab = SettingsTab(self.tabview.add("Settings"), self.state, self._on_result)
        self.settings_tab.pack(fill="both", expand=True)

        self._create_status_bar()

    def _create_status_bar(self):
        bar = ctk.CTkFrame(self, fg_color="transparent")
        bar.pack(fill="x", padx=PADDING["large"], pady=PADDING["medium"])

        self.status_label = ctk.CTkLabel(bar, text="", font=FONTS["small"], anchor="w")
        self.status_label.pack(side="left", fill="x", expand=True)

        save_btn = ctk.CTkButton(
            bar,
            text="Save",
            width=120,
            fg_color=COLORS["primary"],
            hover_color=COLORS["primary_hover"],
            command=self._on_save,
        )
        save_btn.pack(side="right")

        self.modified_label = ctk.CTkLabel(bar, text="", font=FONTS["small"], text_color=COLORS["warning"])
        self.modified_label.pack(side="right", padx=PADDING["medium"])

    def _refresh_ui(self):
        self.games_tab.refresh()
        self.apps_tab.refresh()
        self.settings_tab.refresh()
        self._update_modified_marker()

    def _on_tab_changed(self):
        # App renames and deletions change what the game form offers
        if self.tabview.get() == "Games":
            self.games_tab.refresh()

    def _on_result(self, result: OperationResult):
        if result.message is not None:
            self.set_status(result.message, error=not result.ok)
        self._update_modified_marker()

    def _on_save(self):
        result = self.state.save()
        self._on_result(result)
        if not result.ok and result.message is not None:
            messagebox.showerror("Save failed", tr(result.message), parent=self)

    def _update_modified_marker(self):
        self.modified_label.configure(text="Unsaved changes" if self.state.is_modified() else "")

    def set_status(self, message: Message, error: bool = False):
        self.status_label.configure(
            text=tr(message),
            text_color=COLORS["danger"] if error else ("gray10", "gray90"),
        )

    def show_load_error(self, message: Optional[Message]):
        """Tell the user once that the configuration could not be read."""
        if message is None:
            return
        self.set_status(message, error=True)
        messagebox.showwarning("Configuration error", tr(message), parent=self)

    def _on_close(self):
        if self.state.has_unsaved_changes():
            answer = messagebox.askyesnocancel(
                "Unsaved changes",
                "Save changes before closing?",
                parent=self,
            )
            if answer is None:
                return
            if answer:
                result = self.state.save()
                if not result.ok:
                    self._on_result(result)
                    messagebox.showerror("Save failed", tr(result.message), parent=self)
                    return
        logger.info("Editor window closed")
        self.destroy()
