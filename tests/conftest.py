"""
Mini Games - Test Configuration and Fixtures

Common fixtures and helpers for all test modules.
"""

import random
from typing import Callable

import pytest

from src.config.settings import get_settings
from src.engine.base import BoardView, Cell
from src.engine.code_breaker import CodeBreakerEngine

_SYMBOLS = {"X": Cell.BOT, "O": Cell.HUMAN, ".": Cell.EMPTY}


def parse_board(layout: str) -> tuple[Cell, ...]:
    """
    Build 9 cells from a compact layout such as "XX.|OO.|...".

    X = bot, O = human, . = empty. Separators and spaces are ignored.
    """
    symbols = [ch for ch in layout if ch in _SYMBOLS]
    assert len(symbols) == 9, f"layout needs 9 cells, got {len(symbols)}"
    return tuple(_SYMBOLS[ch] for ch in symbols)


@pytest.fixture
def rng() -> random.Random:
    """Seeded random stream for reproducible tests."""
    return random.Random(20240501)


@pytest.fixture
def board_view() -> Callable[[str, int], BoardView]:
    """Factory for BoardView from a compact layout and a round number."""
    def _make(layout: str, round_number: int) -> BoardView:
        return BoardView(cells=parse_board(layout), round=round_number)
    return _make


@pytest.fixture
def code_breaker_with_secret() -> Callable[..., CodeBreakerEngine]:
    """Factory for a CodeBreakerEngine whose secret is fixed."""
    def _make(secret: tuple[int, ...], clock: Callable[[], float] | None = None) -> CodeBreakerEngine:
        engine = CodeBreakerEngine(clock=clock) if clock else CodeBreakerEngine()
        engine._secret = tuple(secret)
        engine._digit_present = frozenset(secret)
        return engine
    return _make


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings are cached; reset between tests so env changes apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
