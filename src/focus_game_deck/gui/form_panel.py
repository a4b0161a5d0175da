"""Scrollable form whose widgets are read into and filled from a FormInput"""

from typing import Callable, Optional

import customtkinter as ctk

from ..core.form import FormInput
from .styles import COLORS, FONTS, PADDING
from .widgets.path_selector import PathSelector
from .widgets.secret_entry import SecretEntry


class FormPanel(ctk.CTkScrollableFrame):
    """Form built from labelled rows, each bound to a logical field name.

    Subclasses lay out their rows with the ``add_*`` helpers; ``read_form``
    and ``fill_form`` then move values between the widgets and a FormInput.
    """

    def __init__(self, master, **kwargs):
        super().__init__(master, **kwargs)
        self.text_vars: dict[str, ctk.StringVar] = {}
        self.bool_vars: dict[str, ctk.BooleanVar] = {}
        self.path_selectors: dict[str, PathSelector] = {}
        self.secret_entries: dict[str, SecretEntry] = {}
        # Entry widgets by field, for highlighting validation failures
        self.entry_widgets: dict[str, ctk.CTkEntry] = {}

    # -- layout helpers ------------------------------------------------------

    def add_section(self, title: str) -> ctk.CTkFrame:
        section = ctk.CTkFrame(self)
        section.pack(fill="x", pady=(0, PADDING["medium"]))

        header = ctk.CTkLabel(section, text=title, font=FONTS["heading"])
        header.pack(anchor="w", padx=PADDING["medium"], pady=PADDING["small"])
        return section

    def _row(self, section: ctk.CTkFrame) -> ctk.CTkFrame:
        row = ctk.CTkFrame(section, fg_color="transparent")
        row.pack(fill="x", padx=PADDING["medium"], pady=(0, PADDING["small"]))
        row.grid_columnconfigure(1, weight=1)
        return row

    def add_entry(self, section: ctk.CTkFrame, field: str, label: str) -> ctk.CTkEntry:
        row = self._row(section)
        ctk.CTkLabel(row, text=label, width=140, anchor="w").grid(row=0, column=0, padx=(0, 10), sticky="w")
        var = ctk.StringVar()
        entry = ctk.CTkEntry(row, textvariable=var)
        entry.grid(row=0, column=1, sticky="ew")
        self.text_vars[field] = var
        self.entry_widgets[field] = entry
        return entry

    def add_option(
        self,
        section: ctk.CTkFrame,
        field: str,
        label: str,
        values: list[str],
        command: Optional[Callable[[str], None]] = None,
    ) -> ctk.CTkOptionMenu:
        row = self._row(section)
        ctk.CTkLabel(row, text=label, width=140, anchor="w").grid(row=0, column=0, padx=(0, 10), sticky="w")
        var = ctk.StringVar(value=values[0] if values else "")
        menu = ctk.CTkOptionMenu(row, values=values, variable=var, command=command)
        menu.grid(row=0, column=1, sticky="w")
        self.text_vars[field] = var
        return menu

    def add_checkbox(
        self,
        section: ctk.CTkFrame,
        field: str,
        label: str,
        command: Optional[Callable[[], None]] = None,
    ) -> ctk.CTkCheckBox:
        var = ctk.BooleanVar(value=False)
        checkbox = ctk.CTkCheckBox(section, text=label, variable=var, font=FONTS["body"], command=command)
        checkbox.pack(anchor="w", padx=PADDING["medium"], pady=(0, PADDING["small"]))
        self.bool_vars[field] = var
        return checkbox

    def add_path(self, section: ctk.CTkFrame, field: str, label: str, directory: bool = False) -> PathSelector:
        selector = PathSelector(section, label=label, directory=directory)
        selector.pack(fill="x", padx=PADDING["medium"], pady=(0, PADDING["small"]))
        self.path_selectors[field] = selector
        self.entry_widgets[field] = selector.entry
        return selector

    def add_secret(self, section: ctk.CTkFrame, field: str, label: str) -> SecretEntry:
        secret = SecretEntry(section, label=label)
        secret.pack(fill="x", padx=PADDING["medium"], pady=(0, PADDING["small"]))
        self.secret_entries[field] = secret
        self.entry_widgets[field] = secret.entry
        return secret

    # -- data transfer -------------------------------------------------------

    def read_form(self) -> FormInput:
        """Collect every bound widget into a FormInput."""
        form = FormInput()
        for field, var in self.text_vars.items():
            form.set(field, var.get())
        for field, var in self.bool_vars.items():
            form.set(field, var.get())
        for field, selector in self.path_selectors.items():
            form.set(field, selector.get_value())
        for field, secret in self.secret_entries.items():
            form.set(field, secret.get_value())
        return form

    def fill_form(self, form: FormInput):
        """Show the values of a FormInput in the bound widgets."""
        for field, var in self.text_vars.items():
            var.set(form.text(field))
        for field, var in self.bool_vars.items():
            var.set(form.flag(field))
        for field, selector in self.path_selectors.items():
            selector.set_value(form.text(field))
        for field, secret in self.secret_entries.items():
            secret_input = form.secret(field)
            if secret_input is not None:
                secret.load(secret_input)
        self.mark_invalid([])

    def mark_invalid(self, fields: list[str]):
        """Outline the entries of every invalid field."""
        default_border = ctk.ThemeManager.theme["CTkEntry"]["border_color"]
        for field, entry in self.entry_widgets.items():
            entry.configure(border_color=COLORS["invalid"] if field in fields else default_border)
