"""
Mini Games - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive exceptions.
"""

from typing import Sequence

from src.engine.base import (
    BOARD_CELLS,
    BOARD_SIDE,
    Cell,
    InvalidMove,
)

ANSWER_LENGTH = 4


def validate_guess(guess: str | int | Sequence[int]) -> tuple[int, ...]:
    """
    Normalize a code-breaker guess into a tuple of digits.

    Accepts a digit string ("0123"), a non-negative integer below 10000
    (leading zeros implied) or a sequence of single digits. Repeated
    digits are allowed here; scoring reports them.

    Args:
        guess: Raw guess from the caller

    Returns:
        Validated digits as a tuple

    Raises:
        ValueError: If the guess is not four digits
    """
    if isinstance(guess, bool):
        raise ValueError("Guess must be digits, got bool.")

    if isinstance(guess, int):
        if not (0 <= guess < 10 ** ANSWER_LENGTH):
            raise ValueError(
                f"Numeric guess must be between 0 and {10 ** ANSWER_LENGTH - 1}, got {guess}."
            )
        guess = f"{guess:0{ANSWER_LENGTH}d}"

    if isinstance(guess, str):
        text = guess.strip()
        if len(text) != ANSWER_LENGTH or not all(ch in "0123456789" for ch in text):
            raise ValueError(f"Guess must be exactly {ANSWER_LENGTH} digits, got {guess!r}.")
        return tuple(int(ch) for ch in text)

    digits = tuple(guess)
    if len(digits) != ANSWER_LENGTH:
        raise ValueError(f"Guess must have exactly {ANSWER_LENGTH} digits, got {len(digits)}.")
    for i, digit in enumerate(digits):
        if not isinstance(digit, int) or isinstance(digit, bool):
            raise ValueError(f"Digit at index {i} must be an integer, got {type(digit).__name__}.")
        if not (0 <= digit <= 9):
            raise ValueError(f"Digit at index {i} is {digit}, must be between 0 and 9.")
    return digits


def _is_coordinate(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_in_bounds(row: int, column: int) -> bool:
    """Check 1-indexed coordinates against the board. Non-integers are never in bounds."""
    if not (_is_coordinate(row) and _is_coordinate(column)):
        return False
    return 1 <= row <= BOARD_SIDE and 1 <= column <= BOARD_SIDE


def validate_coordinates(row: int, column: int) -> int:
    """
    Convert 1-indexed coordinates to a 0-indexed cell index.

    Raises:
        InvalidMove: If the coordinates are off the board
    """
    if not (_is_coordinate(row) and _is_coordinate(column)):
        raise InvalidMove(f"Coordinates must be integers, got ({row!r}, {column!r}).")
    if not is_in_bounds(row, column):
        raise InvalidMove(
            f"Cell ({row}, {column}) is out of bounds. "
            f"Rows and columns must be between 1 and {BOARD_SIDE}."
        )
    return (row - 1) * BOARD_SIDE + column - 1


def validate_cells(cells: Sequence[Cell | str]) -> tuple[Cell, ...]:
    """
    Validate a board snapshot.

    Args:
        cells: 9 cells, as Cell members or their symbols

    Returns:
        Validated cells as a tuple

    Raises:
        ValueError: If the board has the wrong size or unknown symbols
    """
    if len(cells) != BOARD_CELLS:
        raise ValueError(f"Board must have exactly {BOARD_CELLS} cells, got {len(cells)}.")
    return tuple(c if isinstance(c, Cell) else Cell.from_symbol(c) for c in cells)
