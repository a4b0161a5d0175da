"""Core editing logic module.

This module contains everything the editor does to the configuration
document, independent of any UI toolkit.

Submodules:
    state: StateManager and EditorSession (load, save, rename, delete, reorder)
    binding: Save routines applying form input to games, apps and settings
    validation: Pure validators returning field-attributed errors
    form: FormInput and the logical field names used by the UI
    messages: MessageKey, Message and OperationResult
"""

from .binding import save_app, save_game, save_global_settings
from .form import Field, FormInput
from .messages import Message, MessageKey, OperationResult
from .state import EditorSession, StateManager

__all__ = [
    "EditorSession",
    "Field",
    "FormInput",
    "Message",
    "MessageKey",
    "OperationResult",
    "StateManager",
    "save_app",
    "save_game",
    "save_global_settings",
]
