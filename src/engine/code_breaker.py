"""
Mini Games - Code Breaker Engine (1A2B)

The engine picks a secret of four distinct digits (leading zero allowed).
Each guess is scored as A/B:

    - A: digit is in the secret at the same position
    - B: digit is in the secret at another position

A guess that repeats a digit is never scored; it comes back as an
invalid result and the caller asks again. 4A0B wins.
"""

import logging
import random
import time
from typing import Callable, ClassVar, Sequence

from src.engine import randomness
from src.engine.base import GameMode, GuessResult
from src.engine.validators import ANSWER_LENGTH, validate_guess

logger = logging.getLogger(__name__)


class CodeBreakerEngine:
    """
    One 1A2B session.

    The secret never changes after construction; only the guess
    counters move.
    """

    ANSWER_LENGTH: ClassVar[int] = ANSWER_LENGTH
    MODE: ClassVar[GameMode] = GameMode.CODE_BREAKER

    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        digits = list(range(10))
        randomness.shuffle(digits, rng)

        self._secret: tuple[int, ...] = tuple(digits[:self.ANSWER_LENGTH])
        self._digit_present: frozenset[int] = frozenset(self._secret)
        self._clock = clock
        self._start_time = clock()
        self._guess_count = 0
        self._scored_guess_count = 0

        logger.info("Started %s game", self.game_name)
        logger.debug("Secret answer is %s", self.answer_text)

    @property
    def game_name(self) -> str:
        return self.MODE.display_name

    @property
    def answer(self) -> tuple[int, ...]:
        """The secret digits, for display once the game is over."""
        return self._secret

    @property
    def answer_text(self) -> str:
        return "".join(str(d) for d in self._secret)

    @property
    def guess_count(self) -> int:
        """Every guess submitted, including ones with repeated digits."""
        return self._guess_count

    @property
    def scored_guess_count(self) -> int:
        """Guesses that produced an A/B pair."""
        return self._scored_guess_count

    def score(self, guess: str | int | Sequence[int]) -> GuessResult:
        """
        Score a guess against the secret.

        Args:
            guess: Four digits as a string, integer or sequence

        Returns:
            GuessResult with A/B counts, or an invalid result if any
            digit repeats

        Raises:
            ValueError: If the guess is not four digits
        """
        digits = validate_guess(guess)
        self._guess_count += 1

        seen: set[int] = set()
        a = b = 0
        for position, digit in enumerate(digits):
            if digit in seen:
                logger.debug("Rejected guess %s: repeated digit %d", digits, digit)
                return GuessResult.invalid()
            seen.add(digit)

            if self._secret[position] == digit:
                a += 1
            elif digit in self._digit_present:
                b += 1

        self._scored_guess_count += 1
        result = GuessResult(a=a, b=b)
        logger.debug("Guess #%d %s scored %s", self._guess_count, digits, result)
        return result

    def elapsed(self) -> int:
        """Whole seconds since the game started."""
        return int(self._clock() - self._start_time)
