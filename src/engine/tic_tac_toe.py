"""
Mini Games - Tic-Tac-Toe Engine

A human (O) plays a bot (X) on a 3x3 board. The human always moves
first; each round is one human placement followed by one bot placement.

Game Rules:
- Coordinates are 1-indexed (row, column) from the caller's side
- Three marks on a row, column or diagonal win
- No win is reported before round 3: neither side has three marks yet
- A full board with no winner is a tie
"""

import logging
import random
from typing import Any, ClassVar

from src.engine.base import (
    BOARD_CELLS,
    BOARD_SIDE,
    FIRST_DECISIVE_ROUND,
    WIN_LINES,
    BoardView,
    Cell,
    Difficulty,
    GameMode,
    InvalidMove,
    NoMovesAvailable,
)
from src.engine.opponent import OpponentPolicy, policy_for
from src.engine.validators import is_in_bounds, validate_cells, validate_coordinates

logger = logging.getLogger(__name__)


class TicTacToeEngine:
    """One tic-tac-toe session against a bot of fixed difficulty."""

    BOARD_SIDE: ClassVar[int] = BOARD_SIDE
    MODE: ClassVar[GameMode] = GameMode.TIC_TAC_TOE

    def __init__(
        self,
        difficulty: int | Difficulty = Difficulty.HARD,
        rng: random.Random | None = None,
    ) -> None:
        self._reset(difficulty, rng)
        logger.info("Started %s game at %s difficulty", self.game_name, self._policy.name)

    def _reset(self, difficulty: int | Difficulty, rng: random.Random | None) -> None:
        self._difficulty = Difficulty.from_level(difficulty)
        self._policy: OpponentPolicy = policy_for(self._difficulty)
        self._rng = rng
        self._cells: list[Cell] = [Cell.EMPTY] * BOARD_CELLS
        self._round = 1
        self._empty_count = BOARD_CELLS
        self._winner: Cell | None = None
        self._last_bot_move: tuple[int, int] | None = None

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def game_name(self) -> str:
        return self.MODE.display_name

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @property
    def policy(self) -> OpponentPolicy:
        return self._policy

    @property
    def round(self) -> int:
        return self._round

    @property
    def empty_count(self) -> int:
        return self._empty_count

    @property
    def cells(self) -> tuple[Cell, ...]:
        return tuple(self._cells)

    @property
    def winner(self) -> Cell | None:
        """Cell.HUMAN or Cell.BOT once a line is complete, else None."""
        return self._winner

    @property
    def last_bot_move(self) -> tuple[int, int] | None:
        """1-indexed (row, column) of the latest bot placement."""
        return self._last_bot_move

    @property
    def is_over(self) -> bool:
        return self._winner is not None or self._empty_count == 0

    def rows(self) -> tuple[tuple[Cell, ...], ...]:
        """The board as three rows of three cells."""
        return tuple(
            tuple(self._cells[r * BOARD_SIDE:(r + 1) * BOARD_SIDE])
            for r in range(BOARD_SIDE)
        )

    def view(self) -> BoardView:
        return BoardView(cells=self.cells, round=self._round)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @staticmethod
    def is_in_bounds(row: int, column: int) -> bool:
        """Whether 1-indexed (row, column) lies on the board."""
        return is_in_bounds(row, column)

    def is_occupied(self, row: int, column: int) -> bool:
        """
        Whether the cell at 1-indexed (row, column) holds a mark.

        Raises:
            InvalidMove: If the coordinates are off the board
        """
        return self._cells[validate_coordinates(row, column)] is not Cell.EMPTY

    def has_line(self, symbol: Cell) -> bool:
        """Whether ``symbol`` fills any of the eight win lines."""
        return any(
            all(self._cells[i] is symbol for i in line)
            for line in WIN_LINES
        )

    def is_tie(self) -> bool:
        """Board full and nobody won. Check for a win first."""
        return self._empty_count == 0 and self._winner is None

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def place_human(self, row: int, column: int) -> bool:
        """
        Mark a cell for the human player.

        Args:
            row: 1-indexed row
            column: 1-indexed column

        Returns:
            True if this move won the game

        Raises:
            InvalidMove: If the game is over, the cell is off the board or
                         already taken. The board is left unchanged.
        """
        self._ensure_in_progress()
        index = validate_coordinates(row, column)
        if self._cells[index] is not Cell.EMPTY:
            logger.debug("Rejected human move on occupied cell (%d, %d)", row, column)
            raise InvalidMove(f"Cell ({row}, {column}) is already occupied.")

        self._mark(index, Cell.HUMAN)
        return self._check_win(Cell.HUMAN, self._round)

    def place_bot(self) -> bool:
        """
        Let the opponent policy choose a cell and mark it for the bot.

        The round counter advances after the move; the win check uses
        the round the move was made in.

        Returns:
            True if this move won the game

        Raises:
            InvalidMove: If the game already has a winner
            NoMovesAvailable: If the board is full
        """
        if self._winner is not None:
            raise InvalidMove("The game is already over.")
        if self._empty_count == 0:
            raise NoMovesAvailable("No empty cell left for the bot.")

        index = self._policy.select_cell(self.view(), self._rng)
        if self._cells[index] is not Cell.EMPTY:
            raise InvalidMove(f"Opponent chose occupied cell {index}.")

        self._mark(index, Cell.BOT)
        self._last_bot_move = (index // BOARD_SIDE + 1, index % BOARD_SIDE + 1)

        played_round = self._round
        self._round += 1
        return self._check_win(Cell.BOT, played_round)

    def _ensure_in_progress(self) -> None:
        if self.is_over:
            raise InvalidMove("The game is already over.")

    def _mark(self, index: int, symbol: Cell) -> None:
        self._cells[index] = symbol
        self._empty_count -= 1

    def _check_win(self, symbol: Cell, round_number: int) -> bool:
        if round_number < FIRST_DECISIVE_ROUND:
            return False
        if self.has_line(symbol):
            self._winner = symbol
            logger.info("%s won %s on round %d", symbol.name.lower(), self.game_name, round_number)
            return True
        return False

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary for rendering or storage."""
        return {
            "difficulty": int(self._difficulty),
            "round": self._round,
            "empty_count": self._empty_count,
            "cells": [cell.value for cell in self._cells],
            "winner": self._winner.value if self._winner else None,
        }

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        rng: random.Random | None = None,
    ) -> "TicTacToeEngine":
        """
        Rebuild an engine from ``to_dict`` output.

        The empty count is recomputed from the cells; a stored value that
        disagrees is rejected. A stored winner must be a human or bot mark
        that fills a line on the restored board.

        Raises:
            ValueError: If the snapshot is malformed or inconsistent
        """
        cells = validate_cells(data.get("cells", [Cell.EMPTY.value] * BOARD_CELLS))
        round_number = data.get("round", 1)
        if not isinstance(round_number, int) or round_number < 1:
            raise ValueError(f"Round must be a positive integer, got {round_number!r}.")

        empty_count = sum(1 for cell in cells if cell is Cell.EMPTY)
        stored = data.get("empty_count")
        if stored is not None and stored != empty_count:
            raise ValueError(
                f"Empty count {stored} does not match board with {empty_count} empty cells."
            )

        winner = data.get("winner")
        if winner is not None:
            winner = Cell.from_symbol(winner) if isinstance(winner, str) else winner
            if winner not in (Cell.HUMAN, Cell.BOT):
                raise ValueError(f"Winner must be a human or bot mark, got {winner!r}.")

        engine = cls.__new__(cls)
        engine._reset(data.get("difficulty", Difficulty.HARD), rng)
        engine._cells = list(cells)
        engine._round = round_number
        engine._empty_count = empty_count
        if winner is not None and not engine.has_line(winner):
            raise ValueError(f"Winner {winner.value!r} has no complete line on the board.")
        engine._winner = winner

        logger.debug(
            "Restored %s game on round %d at %s difficulty",
            engine.game_name, round_number, engine._policy.name,
        )
        return engine
