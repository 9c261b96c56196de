"""
Mini Games - Engine Factory

Builds new game sessions, filling in defaults from the application
settings when the caller does not specify them.
"""

import random

from src.config.settings import Settings, get_settings
from src.engine.base import Difficulty, GameMode
from src.engine.code_breaker import CodeBreakerEngine
from src.engine.tic_tac_toe import TicTacToeEngine


def make_rng(settings: Settings) -> random.Random | None:
    """A seeded stream when ``rng_seed`` is configured, else None."""
    if settings.rng_seed is None:
        return None
    return random.Random(settings.rng_seed)


def create_game(
    mode: GameMode | str,
    difficulty: int | Difficulty | None = None,
    settings: Settings | None = None,
) -> CodeBreakerEngine | TicTacToeEngine:
    """
    Start a new game session.

    Args:
        mode: Which game to start (GameMode or its value)
        difficulty: Tic-tac-toe opponent level; ignored for 1A2B
        settings: Settings to read defaults from (default: cached settings)

    Returns:
        A fresh engine instance

    Raises:
        ValueError: If the mode is unknown
    """
    settings = settings or get_settings()
    mode = GameMode(mode)
    rng = make_rng(settings)

    if mode is GameMode.CODE_BREAKER:
        return CodeBreakerEngine(rng=rng)

    if difficulty is None:
        difficulty = settings.default_difficulty
    return TicTacToeEngine(difficulty=difficulty, rng=rng)
