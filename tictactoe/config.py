"""
Configuration for the TicTacToe engine.
Difficulty defaults, scoring constants and logging settings.
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)


def _env_int(name: str) -> Optional[int]:
    """Read an integer from the environment; a bad value is ignored with a warning."""
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", name, value)
        return None


class AIConfig:
    """
    Configuration for the AI opponent.
    Change these values to tune how the computer plays.
    """

    # ==================== DIFFICULTY ====================
    # One of "easy", "medium", "hard"
    DEFAULT_DIFFICULTY = "medium"

    # ==================== MINIMAX ====================
    # Terminal score for a win; a win at depth d scores WIN_SCORE - d
    WIN_SCORE = 10

    # Open in the center on an empty board (every opening scores 0)
    OPEN_WITH_CENTER = True

    # ==================== RANDOMNESS ====================
    # Seed for the easy/medium random source (None = fresh entropy)
    RANDOM_SEED = _env_int("TICTACTOE_SEED")


class LogConfig:
    """Logging settings."""

    LOG_LEVEL = (os.getenv("LOG_LEVEL", "WARNING") or "WARNING").upper()
    LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger with a single stream handler.

    Args:
        level: Log level name; defaults to LogConfig.LOG_LEVEL.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel((level or LogConfig.LOG_LEVEL).upper())

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LogConfig.LOG_FORMAT))
    root.addHandler(handler)
