"""Shared layout of the Games and Managed Apps tabs: list on the left, form on the right"""

from abc import ABCMeta, abstractmethod
from tkinter import messagebox
from typing import Callable, Optional

import customtkinter as ctk

from ..core.form import FormInput
from ..core.messages import OperationResult
from ..core.state import StateManager
from .form_panel import FormPanel
from .styles import COLORS, PADDING
from .widgets.entity_list import EntityList


class EntityTab(ctk.CTkFrame, metaclass=ABCMeta):
    """Base class for a tab editing one ordered collection.

    Subclasses build the form and implement every abstract hook; this class
    wires the list buttons, selection and the Apply button. ``duplicate`` is
    only called when ``allow_duplicate`` is set.
    """

    list_title = ""
    entity_label = ""
    allow_duplicate = False

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

        self.grid_columnconfigure(1, weight=1)
        self.grid_rowconfigure(0, weight=1)

        self.entity_list = EntityList(
            self,
            title=self.list_title,
            on_select=self._on_select,
            on_add=self._on_add,
            on_delete=self._on_delete,
            on_move=self._on_move,
            on_duplicate=self._on_duplicate if self.allow_duplicate else None,
        )
        self.entity_list.grid(row=0, column=0, sticky="nsw", padx=(0, PADDING["medium"]))

        right = ctk.CTkFrame(self, fg_color="transparent")
        right.grid(row=0, column=1, sticky="nsew")

        self.form = self.create_form(right)
        self.form.pack(fill="both", expand=True)

        apply_btn = ctk.CTkButton(
            right,
            text=f"Apply {self.entity_label} changes",
            fg_color=COLORS["success"],
            hover_color=COLORS["success_hover"],
            command=self._on_apply,
        )
        apply_btn.pack(anchor="e", pady=(PADDING["small"], 0))

    # -- hooks ---------------------------------------------------------------

    @abstractmethod
    def create_form(self, master) -> FormPanel:
        ...

    @abstractmethod
    def list_items(self) -> list[tuple[str, str]]:
        ...

    @abstractmethod
    def selected_id(self) -> Optional[str]:
        ...

    @abstractmethod
    def select(self, entity_id: Optional[str]) -> bool:
        ...

    @abstractmethod
    def entity_form(self, entity_id: str) -> FormInput:
        ...

    @abstractmethod
    def add(self) -> OperationResult:
        ...

    def duplicate(self, entity_id: str) -> OperationResult:
        raise NotImplementedError(f"{type(self).__name__} does not duplicate entries")

    @abstractmethod
    def delete(self, entity_id: str) -> OperationResult:
        ...

    @abstractmethod
    def move(self, entity_id: str, offset: int) -> OperationResult:
        ...

    @abstractmethod
    def apply(self, form: FormInput) -> OperationResult:
        ...

    def delete_prompt(self, entity_id: str) -> str:
        return f"Delete '{entity_id}'?"

    # -- behaviour -----------------------------------------------------------

    def refresh(self):
        """Rebuild the list and show the selected entry in the form."""
        self.entity_list.refresh(self.list_items(), self.selected_id())
        self.show_selected()

    def show_selected(self):
        entity_id = self.selected_id()
        if entity_id is None:
            self.form.fill_form(FormInput())
        else:
            self.form.fill_form(self.entity_form(entity_id))

    def _on_select(self, entity_id: str):
        if self.select(entity_id):
            self.entity_list.highlight(entity_id)
            self.show_selected()

    def _on_add(self):
        self._handle(self.add())

    def _on_duplicate(self):
        entity_id = self.selected_id()
        if entity_id is not None:
            self._handle(self.duplicate(entity_id))

    def _on_delete(self):
        entity_id = self.selected_id()
        if entity_id is None:
            return
        if not messagebox.askyesno("Confirm Delete", self.delete_prompt(entity_id), parent=self):
            return
        self._handle(self.delete(entity_id))

    def _on_move(self, offset: int):
        entity_id = self.selected_id()
        if entity_id is not None:
            self._handle(self.move(entity_id, offset))

    def _on_apply(self):
        result = self.apply(self.form.read_form())
        if result.ok:
            self.refresh()
        else:
            self.form.mark_invalid(result.invalid_fields)
        self.on_result(result)

    def _handle(self, result: OperationResult):
        if result.ok:
            self.refresh()
        self.on_result(result)
