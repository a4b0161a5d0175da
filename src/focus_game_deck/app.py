"""Main application entry point"""

import argparse
import sys
from typing import Optional

import customtkinter as ctk

from .config.paths import AppPaths
from .core.state import StateManager
from .gui.main_window import MainWindow
from .logging_config import setup_logging
from . import __version__


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="focus-game-deck-editor", description="Edit the Focus Game Deck configuration")
    parser.add_argument("--config", help="configuration file to edit", default=None)
    parser.add_argument("--debug", action="store_true", help="also log to the console")
    return parser.parse_args(argv)


class EditorApp:
    """Application orchestrator.

    Loads the configuration and runs the main window.
    """

    def __init__(self, config_override: Optional[str] = None):
        self.state = StateManager(AppPaths.resolve_config_path(config_override))
        self.main_window: MainWindow | None = None

    def run(self):
        """Run the application."""
        # Set appearance mode to follow system
        ctk.set_appearance_mode("system")
        ctk.set_default_color_theme("blue")

        result = self.state.load()

        self.main_window = MainWindow(self.state)
        if self.state.session.load_error is not None:
            self.main_window.after(100, self.main_window.show_load_error, self.state.session.load_error)
        elif result.message is not None:
            self.main_window.set_status(result.message, error=not result.ok)

        self.main_window.mainloop()


def main():
    """Application entry point."""
    args = parse_args()

    # Initialize logging first
    logger = setup_logging(debug=args.debug)
    logger.info(f"Starting Focus Game Deck Editor v{__version__}")

    try:
        app = EditorApp(args.config)
        app.run()
    except Exception as e:
        logger.exception("Fatal error during startup")
        # Show error dialog if something goes wrong during startup
        import tkinter as tk
        from tkinter import messagebox

        root = tk.Tk()
        root.withdraw()
        messagebox.showerror(
            "Startup Error",
            f"Failed to start Focus Game Deck Editor:\n\n{e}"
        )
        root.destroy()
        sys.exit(1)
    finally:
        logger.info("Focus Game Deck Editor shutting down")


if __name__ == "__main__":
    main()
