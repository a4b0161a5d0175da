"""Reusable GUI widgets for the editor.

Widgets:
    PathSelector: Label, text entry and browse button for file/directory paths,
                  with a status indicator showing whether the path exists.
    SecretEntry: Masked entry that tracks whether a secret is already stored.
    EntityList: Scrollable list of games or apps with add/delete/move buttons.
"""

from .entity_list import EntityList
from .path_selector import PathSelector
from .secret_entry import SecretEntry

__all__ = [
    "EntityList",
    "PathSelector",
    "SecretEntry",
]
