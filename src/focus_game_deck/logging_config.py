"""Logging for the Focus Game Deck editor.

Every module logs through a child of the "focus_game_deck" logger. Load
fallbacks, order-list repairs, renames and rolled-back operations end up in
focus_game_deck.log next to the default config.json; secrets never do.
"""

import logging
import sys

LOGGER_NAME = "focus_game_deck"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"


def setup_logging(debug: bool = False) -> logging.Logger:
    """Install the editor's log handlers.

    The log file always receives DEBUG records, so a user report can be
    diagnosed from it alone. The console only gets records with --debug.

    Args:
        debug: If True, also log to console at DEBUG level

    Returns:
        The "focus_game_deck" logger
    """
    # Imported here: the config package logs through this module
    from .config.paths import AppPaths

    AppPaths.ensure_config_dir()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Calling again replaces the handlers instead of duplicating every line
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = logging.FileHandler(AppPaths.LOG_FILE, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(file_handler)

    if debug:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger for one editor module, e.g. get_logger("state")."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
