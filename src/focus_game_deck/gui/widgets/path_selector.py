"""Reusable path selection widget"""

from pathlib import Path
from tkinter import filedialog
from typing import Callable, Optional

import customtkinter as ctk


class PathSelector(ctk.CTkFrame):
    """A widget for entering or browsing to a file or directory path.

    Combines a text entry field with a browse button. Values are plain
    strings so blank means "not set".
    """

    def __init__(
        self,
        master,
        label: str = "Path:",
        initial_value: str = "",
        directory: bool = False,
        filetypes: Optional[list[tuple[str, str]]] = None,
        on_change: Optional[Callable[[str], None]] = None,
        **kwargs
    ):
        """Initialize the path selector widget.

        Args:
            master: Parent widget
            label: Label text to display
            initial_value: Initial path text
            directory: If True, select directories; if False, select files
            filetypes: File dialog filters, e.g. [("Programs", "*.exe")]
            on_change: Callback receiving the new text when it changes
            **kwargs: Additional arguments for CTkFrame
        """
        super().__init__(master, fg_color="transparent", **kwargs)

        self.directory = directory
        self.filetypes = filetypes or [("Programs", "*.exe"), ("All files", "*.*")]
        self.on_change = on_change

        # Configure grid
        self.grid_columnconfigure(1, weight=1)

        self.label = ctk.CTkLabel(self, text=label, width=140, anchor="w")
        self.label.grid(row=0, column=0, padx=(0, 10), sticky="w")

        self.path_var = ctk.StringVar(value=initial_value)
        self.entry = ctk.CTkEntry(self, textvariable=self.path_var)
        self.entry.grid(row=0, column=1, padx=(0, 10), sticky="ew")

        self.path_var.trace_add("write", self._on_entry_change)

        self.browse_btn = ctk.CTkButton(
            self,
            text="Browse",
            width=80,
            command=self._browse,
        )
        self.browse_btn.grid(row=0, column=2, sticky="e")

        # Status indicator
        self.status_label = ctk.CTkLabel(self, text="", width=24)
        self.status_label.grid(row=0, column=3, padx=(5, 0))

        self._update_status()

    def _browse(self):
        """Open file dialog to select path."""
        initial_dir = None
        current = self.get_value()
        if current:
            current_path = Path(current)
            if current_path.exists():
                initial_dir = str(current_path if current_path.is_dir() else current_path.parent)

        if self.directory:
            selected = filedialog.askdirectory(initialdir=initial_dir, title="Select Directory")
        else:
            selected = filedialog.askopenfilename(
                initialdir=initial_dir,
                title="Select File",
                filetypes=self.filetypes,
            )

        if selected:
            self.set_value(selected)

    def _on_entry_change(self, *args):
        self._update_status()
        if self.on_change:
            self.on_change(self.get_value())

    def _update_status(self):
        """Show whether the entered path exists on this machine."""
        value = self.get_value()
        if value and Path(value).exists():
            self.status_label.configure(text="OK", text_color="green")
        elif value:
            self.status_label.configure(text="?", text_color="orange")
        else:
            self.status_label.configure(text="", text_color="gray")

    def get_value(self) -> str:
        return self.path_var.get().strip()

    def set_value(self, value: str):
        self.path_var.set(value or "")
        self._update_status()

    def set_enabled(self, enabled: bool):
        state = "normal" if enabled else "disabled"
        self.entry.configure(state=state)
        self.browse_btn.configure(state=state)
