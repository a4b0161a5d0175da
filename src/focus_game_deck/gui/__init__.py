"""GUI module using CustomTkinter for a modern interface.

The GUI is a thin adapter: it reads widgets into FormInput objects and
hands them to the core save routines.

Components:
    MainWindow: Main window with tabs for:
        - Games: game list, platform identifiers, managed apps, integrations
        - Managed Apps: companion apps and their start/end actions
        - Settings: launcher paths, OBS/Discord/VTube Studio, logging

Submodules:
    styles: Theme constants (colors, fonts, padding, window sizes)
    strings: English text for message keys
    widgets: Reusable widget components (PathSelector, SecretEntry, EntityList)
"""

from .main_window import MainWindow

__all__ = [
    "MainWindow",
]
