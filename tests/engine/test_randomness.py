"""
Tests for randomness helpers.
"""

import random

from src.engine import randomness


class TestShuffle:
    """Tests for in-place shuffling."""

    def test_is_permutation(self, rng):
        items = list(range(10))
        randomness.shuffle(items, rng)
        assert sorted(items) == list(range(10))

    def test_same_seed_same_order(self):
        first = list(range(10))
        second = list(range(10))
        randomness.shuffle(first, random.Random(7))
        randomness.shuffle(second, random.Random(7))
        assert first == second

    def test_empty_and_single(self, rng):
        empty: list[int] = []
        single = [5]
        randomness.shuffle(empty, rng)
        randomness.shuffle(single, rng)
        assert empty == []
        assert single == [5]

    def test_every_position_reachable(self, rng):
        """Each element ends up in the first slot over many shuffles."""
        firsts = set()
        for _ in range(500):
            items = [0, 1, 2, 3]
            randomness.shuffle(items, rng)
            firsts.add(items[0])
        assert firsts == {0, 1, 2, 3}

    def test_shuffled_leaves_input(self, rng):
        items = (1, 2, 3, 4)
        result = randomness.shuffled(items, rng)
        assert items == (1, 2, 3, 4)
        assert sorted(result) == [1, 2, 3, 4]

    def test_module_stream_seed(self):
        randomness.seed(11)
        first = randomness.shuffled(range(10))
        randomness.seed(11)
        second = randomness.shuffled(range(10))
        assert first == second


class TestChance:
    """Tests for percentage chance."""

    def test_zero_never(self, rng):
        assert not any(randomness.chance(0, rng) for _ in range(200))

    def test_hundred_always(self, rng):
        assert all(randomness.chance(100, rng) for _ in range(200))

    def test_fifty_both_outcomes(self, rng):
        outcomes = {randomness.chance(50, rng) for _ in range(200)}
        assert outcomes == {True, False}


class TestRandomElement:
    """Tests for uniform element pick."""

    def test_in_sequence(self, rng):
        items = (3, 5, 8)
        for _ in range(100):
            assert randomness.random_element(items, rng) in items

    def test_covers_all(self, rng):
        picks = {randomness.random_element("abc", rng) for _ in range(300)}
        assert picks == {"a", "b", "c"}
