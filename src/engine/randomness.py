"""
Mini Games - Randomness Helpers

Small wrappers around a private random stream. Every function accepts an
optional ``random.Random`` so tests and seeded sessions can supply their own.
"""

import random
from typing import MutableSequence, Sequence, TypeVar

T = TypeVar("T")

_rng = random.Random()


def seed(value: int | None = None) -> None:
    """Reseed the module-level stream."""
    _rng.seed(value)


def _stream(rng: random.Random | None) -> random.Random:
    return _rng if rng is None else rng


def shuffle(items: MutableSequence[T], rng: random.Random | None = None) -> None:
    """
    Shuffle a sequence in place.

    Walks forward, swapping each position i with a uniformly chosen
    position in [i, n-1]. The last position never needs a swap.

    Args:
        items: Sequence to permute
        rng: Optional random stream
    """
    r = _stream(rng)
    end = len(items) - 1
    for i in range(end):
        dest = r.randrange(i, len(items))
        items[i], items[dest] = items[dest], items[i]


def shuffled(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a shuffled copy, leaving the input untouched."""
    copy = list(items)
    shuffle(copy, rng)
    return copy


def chance(percent: int, rng: random.Random | None = None) -> bool:
    """Returns True with probability ``percent / 100``."""
    return percent > _stream(rng).randrange(100)


def random_element(items: Sequence[T], rng: random.Random | None = None) -> T:
    """
    Pick one element uniformly by index.

    ``items`` must not be empty; callers guarantee this.
    """
    return items[_stream(rng).randrange(len(items))]
