"""Focus Game Deck Editor - configuration editor for the Focus Game Deck launcher.

This application edits the JSON configuration consumed by the launcher:
    - Games and the platform they are started through (Steam, Epic, EA, Riot, direct)
    - Managed apps started, stopped or toggled around a game session
    - OBS, Discord and VTube Studio integration settings
    - Launcher paths and log retention

The application uses CustomTkinter for its GUI. Secrets (OBS websocket
password, VTube Studio token) are stored encrypted with a key bound to the
current user and machine.

Package Structure:
    app: Main application entry point
    config: Document model, persistence, paths and secret encryption
    core: Session state, validation and form binding
    gui: User interface components (main window, tabs, widgets)

Quick Start:
    Run from command line::

        python -m focus_game_deck [--config PATH] [--debug]

Configuration:
    - Config file: %APPDATA%/FocusGameDeck/config.json
    - Log file: %APPDATA%/FocusGameDeck/focus_game_deck.log
"""

__version__ = "1.0.0"
__app_name__ = "Focus Game Deck"
