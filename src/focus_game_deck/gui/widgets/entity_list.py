"""Selectable list of games or managed apps"""

from typing import Callable, Optional

import customtkinter as ctk

from ..styles import COLORS, FONTS, PADDING, WINDOW_SIZES


class EntityList(ctk.CTkFrame):
    """Scrollable list of IDs with add/delete/move buttons.

    Rows are shown in order-list order. The owner supplies callbacks and
    calls ``refresh`` after every change to the collection.
    """

    def __init__(
        self,
        master,
        title: str,
        on_select: Callable[[str], None],
        on_add: Callable[[], None],
        on_delete: Callable[[], None],
        on_move: Callable[[int], None],
        on_duplicate: Optional[Callable[[], None]] = None,
        **kwargs
    ):
        super().__init__(master, width=WINDOW_SIZES["list_width"], **kwargs)
        self.on_select = on_select
        self.rows: dict[str, ctk.CTkButton] = {}
        self.selected_id: Optional[str] = None

        header = ctk.CTkLabel(self, text=title, font=FONTS["heading"])
        header.pack(anchor="w", padx=PADDING["medium"], pady=(PADDING["medium"], PADDING["small"]))

        self.scroll = ctk.CTkScrollableFrame(self, width=WINDOW_SIZES["list_width"] - 30)
        self.scroll.pack(fill="both", expand=True, padx=PADDING["small"])

        buttons = ctk.CTkFrame(self, fg_color="transparent")
        buttons.pack(fill="x", padx=PADDING["small"], pady=PADDING["small"])

        ctk.CTkButton(buttons, text="Add", width=56, command=on_add).pack(side="left", padx=2)
        if on_duplicate is not None:
            ctk.CTkButton(buttons, text="Copy", width=56, command=on_duplicate).pack(side="left", padx=2)
        ctk.CTkButton(
            buttons,
            text="Delete",
            width=56,
            fg_color=COLORS["danger"],
            hover_color=COLORS["danger_hover"],
            command=on_delete,
        ).pack(side="left", padx=2)
        ctk.CTkButton(buttons, text="▲", width=32, command=lambda: on_move(-1)).pack(side="right", padx=2)
        ctk.CTkButton(buttons, text="▼", width=32, command=lambda: on_move(1)).pack(side="right", padx=2)

    def refresh(self, items: list[tuple[str, str]], selected_id: Optional[str]):
        """Rebuild the rows.

        Args:
            items: (id, label) pairs in display order
            selected_id: ID to highlight
        """
        for row in self.rows.values():
            row.destroy()
        self.rows.clear()

        for entity_id, label in items:
            row = ctk.CTkButton(
                self.scroll,
                text=label,
                anchor="w",
                fg_color="transparent",
                text_color=("gray10", "gray90"),
                hover_color=COLORS["selected"],
                command=lambda eid=entity_id: self.on_select(eid),
            )
            row.pack(fill="x", pady=1)
            self.rows[entity_id] = row

        self.highlight(selected_id)

    def highlight(self, selected_id: Optional[str]):
        self.selected_id = selected_id
        for entity_id, row in self.rows.items():
            row.configure(fg_color=COLORS["selected"] if entity_id == selected_id else "transparent")
