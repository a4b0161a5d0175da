"""Password entry that knows whether a secret is already stored"""

import customtkinter as ctk

from ...config.security import SecretInput

SAVED_PLACEHOLDER = "(saved - type to replace)"


class SecretEntry(ctk.CTkFrame):
    """Masked entry for a secret field.

    A stored secret is never shown. The entry stays blank and the saved
    marker is set instead; leaving it blank keeps the stored value, typing
    replaces it, and the Clear button drops it.
    """

    def __init__(self, master, label: str, **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self.saved = False

        self.grid_columnconfigure(1, weight=1)

        self.label = ctk.CTkLabel(self, text=label, width=140, anchor="w")
        self.label.grid(row=0, column=0, padx=(0, 10), sticky="w")

        self.entry = ctk.CTkEntry(self, show="*")
        self.entry.grid(row=0, column=1, padx=(0, 10), sticky="ew")

        self.clear_btn = ctk.CTkButton(
            self,
            text="Clear",
            width=80,
            fg_color="transparent",
            border_width=1,
            text_color=("gray10", "gray90"),
            command=self.clear,
        )
        self.clear_btn.grid(row=0, column=2, sticky="e")

    def load(self, secret_input: SecretInput):
        """Show a field as loaded from the document."""
        self.entry.delete(0, "end")
        self.saved = secret_input.saved
        self._update_placeholder()

    def clear(self):
        """Forget the stored secret on the next save."""
        self.entry.delete(0, "end")
        self.saved = False
        self._update_placeholder()

    def get_value(self) -> SecretInput:
        return SecretInput(value=self.entry.get(), saved=self.saved)

    def _update_placeholder(self):
        self.entry.configure(placeholder_text=SAVED_PLACEHOLDER if self.saved else "")
