"""
Mini Games Engine.

Pure Python game logic with zero UI/database dependencies.
Handles 1A2B code breaking and tic-tac-toe against a tiered bot.
"""

from src.engine.base import (
    BoardView,
    Cell,
    Difficulty,
    GameMode,
    GuessResult,
    InvalidMove,
    NoMovesAvailable,
    RoundPhase,
)
from src.engine.code_breaker import CodeBreakerEngine
from src.engine.opponent import EASY, HARD, NORMAL, OpponentPolicy, policy_for
from src.engine.tic_tac_toe import TicTacToeEngine

__all__ = [
    # Data Classes
    "BoardView",
    "GuessResult",
    # Enums
    "Cell",
    "Difficulty",
    "GameMode",
    "RoundPhase",
    # Errors
    "InvalidMove",
    "NoMovesAvailable",
    # Opponents
    "OpponentPolicy",
    "EASY",
    "NORMAL",
    "HARD",
    "policy_for",
    # Engines
    "CodeBreakerEngine",
    "TicTacToeEngine",
]
