"""
Tests for the 1A2B code breaker engine.
"""

import logging
import random
from itertools import permutations

import pytest

from src.engine.base import GuessResult
from src.engine.code_breaker import CodeBreakerEngine


class TestSecretGeneration:
    """Tests for answer generation."""

    def test_four_distinct_digits(self):
        for seed in range(200):
            engine = CodeBreakerEngine(rng=random.Random(seed))
            assert len(engine.answer) == 4
            assert len(set(engine.answer)) == 4
            assert all(0 <= d <= 9 for d in engine.answer)

    def test_leading_zero_possible(self):
        firsts = {CodeBreakerEngine(rng=random.Random(seed)).answer[0] for seed in range(300)}
        assert 0 in firsts

    def test_seeded_games_repeat(self):
        assert CodeBreakerEngine(rng=random.Random(3)).answer == CodeBreakerEngine(rng=random.Random(3)).answer

    def test_answer_text(self, code_breaker_with_secret):
        engine = code_breaker_with_secret((0, 5, 2, 9))
        assert engine.answer_text == "0529"

    def test_game_name(self):
        assert CodeBreakerEngine().game_name == "1A2B"


class TestScoring:
    """Tests for A/B scoring."""

    def test_exact_match_wins(self, code_breaker_with_secret):
        engine = code_breaker_with_secret((3, 1, 4, 2))
        result = engine.score([3, 1, 4, 2])
        assert result == GuessResult(a=4, b=0)
        assert result.is_win

    def test_two_swapped(self, code_breaker_with_secret):
        engine = code_breaker_with_secret((3, 1, 4, 2))
        assert engine.score([1, 3, 4, 2]).as_pair() == (2, 2)

    def test_all_wrong_positions(self, code_breaker_with_secret):
        engine = code_breaker_with_secret((3, 1, 4, 2))
        assert engine.score("2314").as_pair() == (0, 4)

    def test_no_common_digits(self, code_breaker_with_secret):
        engine = code_breaker_with_secret((3, 1, 4, 2))
        assert engine.score("5678").as_pair() == (0, 0)

    def test_mixed(self, code_breaker_with_secret):
        engine = code_breaker_with_secret((3, 1, 4, 2))
        # 3 in place, 2 elsewhere, 7 and 9 absent
        assert engine.score("3729").as_pair() == (1, 1)

    def test_input_forms_agree(self, code_breaker_with_secret):
        engine = code_breaker_with_secret((0, 1, 2, 3))
        assert engine.score("0123") == engine.score(123) == engine.score((0, 1, 2, 3))

    def test_score_bounds_over_every_guess(self, code_breaker_with_secret):
        secret = (7, 0, 3, 5)
        engine = code_breaker_with_secret(secret)
        for guess in permutations(range(10), 4):
            result = engine.score(guess)
            assert not result.is_invalid
            assert result.a + result.b <= 4
            assert (result.a == 4) == (guess == secret)


class TestInvalidGuesses:
    """Tests for guesses with repeated digits."""

    @pytest.mark.parametrize("guess", ["1123", "3333", "1231", "0990"])
    def test_repeated_digit_is_invalid(self, code_breaker_with_secret, guess):
        engine = code_breaker_with_secret((3, 1, 4, 2))
        result = engine.score(guess)
        assert result.is_invalid
        assert result.as_pair() is None

    def test_repeat_of_secret_digits_still_invalid(self, code_breaker_with_secret):
        engine = code_breaker_with_secret((3, 1, 4, 2))
        assert engine.score([3, 1, 4, 3]).is_invalid

    def test_malformed_guess_raises(self, code_breaker_with_secret):
        engine = code_breaker_with_secret((3, 1, 4, 2))
        with pytest.raises(ValueError):
            engine.score("12")
        assert engine.guess_count == 0


class TestCounters:
    """Tests for guess counting and timing."""

    def test_invalid_guesses_count_as_attempts(self, code_breaker_with_secret):
        engine = code_breaker_with_secret((3, 1, 4, 2))
        engine.score("1123")
        engine.score("5678")
        engine.score("3142")
        assert engine.guess_count == 3
        assert engine.scored_guess_count == 2

    def test_starts_at_zero(self):
        engine = CodeBreakerEngine()
        assert engine.guess_count == 0
        assert engine.scored_guess_count == 0

    def test_elapsed_floors_to_seconds(self):
        now = [100.0]
        engine = CodeBreakerEngine(clock=lambda: now[0])
        assert engine.elapsed() == 0
        now[0] = 112.9
        assert engine.elapsed() == 12


class TestLogging:
    """The secret stays out of INFO-level logs."""

    def test_secret_not_logged_above_debug(self, caplog):
        secret_rng = random.Random(8)
        with caplog.at_level(logging.DEBUG, logger="src.engine.code_breaker"):
            engine = CodeBreakerEngine(rng=secret_rng)
            engine.score(engine.answer_text)

        loud = [r for r in caplog.records if r.levelno >= logging.INFO]
        assert any("Started" in r.getMessage() for r in loud)
        assert all(engine.answer_text not in r.getMessage() for r in loud)

    def test_creation_logged_at_info(self, caplog):
        with caplog.at_level(logging.INFO, logger="src.engine.code_breaker"):
            CodeBreakerEngine()
        assert [r.levelno for r in caplog.records] == [logging.INFO]

    def test_repeated_digit_logged_at_debug(self, caplog, code_breaker_with_secret):
        engine = code_breaker_with_secret((3, 1, 4, 2))
        with caplog.at_level(logging.DEBUG, logger="src.engine.code_breaker"):
            engine.score("1123")
        rejected = [r for r in caplog.records if "repeated digit" in r.getMessage()]
        assert [r.levelno for r in rejected] == [logging.DEBUG]
