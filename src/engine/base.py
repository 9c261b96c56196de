"""
Mini Games - Game Engine Base Classes

This module defines the foundational data structures, enums and error types
used throughout the game engine. Value objects are frozen dataclasses so they
can be handed to callers without exposing engine internals.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum


class GameMode(Enum):
    """Available mini games."""
    CODE_BREAKER = "1A2B"
    TIC_TAC_TOE = "Tic-Tac-Toe"

    @property
    def display_name(self) -> str:
        return self.value


class Cell(Enum):
    """State of a single tic-tac-toe cell."""
    EMPTY = " "
    HUMAN = "O"  # nought
    BOT = "X"    # cross

    @classmethod
    def from_symbol(cls, symbol: str) -> "Cell":
        """Look up a cell by its board symbol."""
        for cell in cls:
            if cell.value == symbol:
                return cell
        raise ValueError(f"Unknown cell symbol {symbol!r}.")


class Difficulty(IntEnum):
    """Opponent strength for tic-tac-toe."""
    EASY = 1
    NORMAL = 2
    HARD = 3

    @classmethod
    def from_level(cls, level: "int | Difficulty") -> "Difficulty":
        """
        Resolve a numeric level to a difficulty.

        Only 1 and 2 select the weaker opponents; every other value,
        including out-of-range ones, plays as HARD.
        """
        if level == cls.EASY:
            return cls.EASY
        if level == cls.NORMAL:
            return cls.NORMAL
        return cls.HARD


class RoundPhase(IntEnum):
    """Which part of the game the opponent is deciding for."""
    OPENING = 1
    SECOND = 2
    LATER = 3

    @classmethod
    def for_round(cls, round_number: int) -> "RoundPhase":
        if round_number <= 1:
            return cls.OPENING
        if round_number == 2:
            return cls.SECOND
        return cls.LATER


# Board geometry. Fixed at 3x3; nothing below generalizes to other sizes.
BOARD_SIDE = 3
BOARD_CELLS = BOARD_SIDE * BOARD_SIDE
CENTER = BOARD_CELLS // 2
LEFT_CORNER = 0

WIN_LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)

# No three-in-a-row can exist before each side has had three placements.
FIRST_DECISIVE_ROUND = 3


class InvalidMove(ValueError):
    """A placement was out of bounds, on an occupied cell, or after game end."""


class NoMovesAvailable(RuntimeError):
    """The opponent was asked to move on a board with no empty cells."""


@dataclass(frozen=True)
class GuessResult:
    """
    Outcome of scoring one code-breaker guess.

    Attributes:
        a: Digits correct and in the correct position
        b: Digits in the answer but in the wrong position
        is_invalid: The guess repeated a digit and was not scored
    """
    a: int = 0
    b: int = 0
    is_invalid: bool = False

    @classmethod
    def invalid(cls) -> "GuessResult":
        return cls(a=0, b=0, is_invalid=True)

    @property
    def is_win(self) -> bool:
        """Returns True if every digit is in the right place."""
        return not self.is_invalid and self.a == 4

    def as_pair(self) -> tuple[int, int] | None:
        """The (A, B) pair, or None for an invalid guess."""
        if self.is_invalid:
            return None
        return (self.a, self.b)

    def __str__(self) -> str:
        if self.is_invalid:
            return "Invalid guess: digits must not repeat."
        return f"{self.a}A{self.b}B"


@dataclass(frozen=True)
class BoardView:
    """
    Read-only picture of a tic-tac-toe board handed to opponent policies.

    Attributes:
        cells: The 9 cells, row-major, 0-indexed
        round: Current round number (1-based, counts bot moves)
    """
    cells: tuple[Cell, ...]
    round: int

    def __post_init__(self) -> None:
        if len(self.cells) != BOARD_CELLS:
            raise ValueError(
                f"Board must have exactly {BOARD_CELLS} cells, got {len(self.cells)}."
            )

    @property
    def phase(self) -> RoundPhase:
        return RoundPhase.for_round(self.round)

    def empty_indices(self) -> tuple[int, ...]:
        """Indices of all cells that are still empty."""
        return tuple(i for i, cell in enumerate(self.cells) if cell is Cell.EMPTY)

    def is_empty(self, index: int) -> bool:
        return self.cells[index] is Cell.EMPTY
