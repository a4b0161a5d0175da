"""Tests for the editor's log setup"""

import logging

import pytest

from focus_game_deck.config.paths import AppPaths
from focus_game_deck.logging_config import LOGGER_NAME, get_logger, setup_logging


@pytest.fixture
def log_dir(tmp_path, monkeypatch):
    """Send the log file to a temporary directory and detach handlers afterwards."""
    monkeypatch.setattr(AppPaths, "CONFIG_DIR", tmp_path / "logs")
    monkeypatch.setattr(AppPaths, "LOG_FILE", tmp_path / "logs" / "focus_game_deck.log")
    yield tmp_path / "logs"
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_module_loggers_write_to_the_log_file(log_dir):
    setup_logging()

    get_logger("state").info("Renamed game apex to apexLegends")
    for handler in logging.getLogger(LOGGER_NAME).handlers:
        handler.flush()

    text = (log_dir / "focus_game_deck.log").read_text(encoding="utf-8")
    assert "focus_game_deck.state - INFO - Renamed game apex to apexLegends" in text


def test_debug_adds_console_handler(log_dir):
    logger = setup_logging(debug=True)

    kinds = sorted(type(handler).__name__ for handler in logger.handlers)
    assert kinds == ["FileHandler", "StreamHandler"]


def test_repeated_setup_does_not_duplicate_handlers(log_dir):
    setup_logging()
    first = logging.getLogger(LOGGER_NAME).handlers[0]

    logger = setup_logging()

    assert len(logger.handlers) == 1
    assert first.stream is None
