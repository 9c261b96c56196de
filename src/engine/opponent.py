"""
Mini Games - Tic-Tac-Toe Opponent Policies

Each difficulty is a table from round phase to an ordered list of
heuristics. Heuristics are tried in order and the first one that names
a cell wins; when none does, the bot plays a random empty cell.

Tiers are built from one another:

    - Easy:   center (or corner if the human took it) on round 1,
              random afterwards
    - Normal: Easy, plus on round 2 block a human two-in-a-row, else
              extend from the bot's first mark
    - Hard:   Normal, plus from round 3 complete a bot line first,
              then block a human line

None of the tiers looks further ahead than one move.
"""

import logging
import random
from dataclasses import dataclass
from typing import Callable, Mapping

from src.engine import randomness
from src.engine.base import (
    CENTER,
    LEFT_CORNER,
    WIN_LINES,
    BoardView,
    Cell,
    Difficulty,
    NoMovesAvailable,
    RoundPhase,
)

logger = logging.getLogger(__name__)

Heuristic = Callable[[BoardView, random.Random | None], int | None]

# Pairs on a line through the bot's round-1 mark.
CORNER_PAIRS: tuple[tuple[int, int], ...] = ((1, 2), (3, 6), (4, 8))
CENTER_PAIRS: tuple[tuple[int, int], ...] = ((0, 8), (1, 7), (2, 6), (3, 5))


def find_line_gap(
    view: BoardView,
    owner: Cell,
    rng: random.Random | None = None,
) -> int | None:
    """
    Find the empty cell of a line where ``owner`` holds the other two.

    Lines are scanned in a fresh random order so that repeated games do
    not always favor the same line when several qualify.
    """
    for line in randomness.shuffled(WIN_LINES, rng):
        marks = [view.cells[i] for i in line]
        if marks.count(owner) == 2 and marks.count(Cell.EMPTY) == 1:
            return line[marks.index(Cell.EMPTY)]
    return None


def take_center_or_corner(view: BoardView, rng: random.Random | None = None) -> int | None:
    """Round 1: the center, or the top-left corner if the human holds the center."""
    return LEFT_CORNER if view.cells[CENTER] is Cell.HUMAN else CENTER


def block_human_line(view: BoardView, rng: random.Random | None = None) -> int | None:
    return find_line_gap(view, Cell.HUMAN, rng)


def complete_bot_line(view: BoardView, rng: random.Random | None = None) -> int | None:
    return find_line_gap(view, Cell.BOT, rng)


def extend_first_mark(view: BoardView, rng: random.Random | None = None) -> int | None:
    """
    Round 2: pick a cell on an open line through the bot's first mark.

    From the corner, the far cell of the first open pair is taken. From
    the center, either cell of the first open pair is taken at random.
    """
    from_corner = view.cells[LEFT_CORNER] is Cell.BOT
    pairs = randomness.shuffled(CORNER_PAIRS if from_corner else CENTER_PAIRS, rng)
    for near, far in pairs:
        if view.is_empty(near) and view.is_empty(far):
            if from_corner:
                return far
            return near if randomness.chance(50, rng) else far
    return None


def random_empty_cell(view: BoardView, rng: random.Random | None = None) -> int:
    """
    Any empty cell, uniformly.

    Raises:
        NoMovesAvailable: If the board is full
    """
    empty = view.empty_indices()
    if not empty:
        raise NoMovesAvailable("No empty cell left for the bot.")
    return randomness.random_element(empty, rng)


@dataclass(frozen=True)
class OpponentPolicy:
    """
    Decision table for one difficulty.

    Attributes:
        difficulty: Difficulty this policy plays at
        plan: Heuristics to try, per round phase, before falling back to
              a random empty cell
    """
    difficulty: Difficulty
    plan: Mapping[RoundPhase, tuple[Heuristic, ...]]

    @property
    def name(self) -> str:
        return self.difficulty.name.lower()

    def heuristics_for(self, phase: RoundPhase) -> tuple[Heuristic, ...]:
        return self.plan.get(phase, ())

    def select_cell(self, view: BoardView, rng: random.Random | None = None) -> int:
        """
        Choose the bot's next cell.

        Args:
            view: Current board and round
            rng: Optional random stream for tie-breaking

        Returns:
            0-indexed cell index, always empty on ``view``
        """
        for heuristic in self.heuristics_for(view.phase):
            index = heuristic(view, rng)
            if index is not None and view.is_empty(index):
                logger.debug(
                    "%s bot chose cell %d via %s on round %d",
                    self.name, index, heuristic.__name__, view.round,
                )
                return index

        index = random_empty_cell(view, rng)
        logger.debug("%s bot chose random cell %d on round %d", self.name, index, view.round)
        return index


_EASY_PLAN: dict[RoundPhase, tuple[Heuristic, ...]] = {
    RoundPhase.OPENING: (take_center_or_corner,),
    RoundPhase.SECOND: (),
    RoundPhase.LATER: (),
}

_NORMAL_PLAN: dict[RoundPhase, tuple[Heuristic, ...]] = {
    RoundPhase.OPENING: _EASY_PLAN[RoundPhase.OPENING],
    RoundPhase.SECOND: (block_human_line, extend_first_mark) + _EASY_PLAN[RoundPhase.SECOND],
    RoundPhase.LATER: _EASY_PLAN[RoundPhase.LATER],
}

_HARD_PLAN: dict[RoundPhase, tuple[Heuristic, ...]] = {
    RoundPhase.OPENING: _NORMAL_PLAN[RoundPhase.OPENING],
    RoundPhase.SECOND: _NORMAL_PLAN[RoundPhase.SECOND],
    RoundPhase.LATER: (complete_bot_line, block_human_line) + _NORMAL_PLAN[RoundPhase.LATER],
}

EASY = OpponentPolicy(Difficulty.EASY, _EASY_PLAN)
NORMAL = OpponentPolicy(Difficulty.NORMAL, _NORMAL_PLAN)
HARD = OpponentPolicy(Difficulty.HARD, _HARD_PLAN)

POLICIES: dict[Difficulty, OpponentPolicy] = {
    Difficulty.EASY: EASY,
    Difficulty.NORMAL: NORMAL,
    Difficulty.HARD: HARD,
}


def policy_for(level: int | Difficulty) -> OpponentPolicy:
    """Policy for a difficulty level; unknown levels play as Hard."""
    return POLICIES[Difficulty.from_level(level)]
