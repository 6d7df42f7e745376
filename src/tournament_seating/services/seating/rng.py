"""Seeded pseudo-random sequence used by every seating algorithm.

A fixed 64-bit linear congruential generator: the same seed yields the same
seating on every platform and interpreter version.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from tournament_seating.models.seating import TABLE_SIZE, Player, PlayersMap

T = TypeVar("T")

MASK_64 = (1 << 64) - 1
LCG_MULTIPLIER = 6364136223846793005
LCG_INCREMENT = 1442695040888963407


class SeededRandom:
    """64-bit LCG producing a reproducible sequence from an integer seed.

    Example:
        >>> rng = SeededRandom(1)
        >>> rng.next()
        908834774
    """

    def __init__(self, seed: int) -> None:
        self.state = seed & MASK_64

    def next(self) -> int:
        """Advance the generator and return its high 31 bits."""
        self.state = (self.state * LCG_MULTIPLIER + LCG_INCREMENT) & MASK_64
        return self.state >> 33

    def randbelow(self, bound: int) -> int:
        """Pick an index uniformly-ish from ``[0, bound)`` by modulus reduction."""
        if bound <= 0:
            msg = f"bound must be positive, got {bound}"
            raise ValueError(msg)
        return self.next() % bound


def shuffle(items: Sequence[T], rng: SeededRandom) -> list[T]:
    """Fisher-Yates shuffle driven by ``rng``.

    Walks from the last element down, swapping each with an element at a
    random index in ``[0, i]``. Returns a new list; ``items`` is not modified.
    """
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randbelow(i + 1)
        if i != j:
            result[i], result[j] = result[j], result[i]
    return result


def randomize_winds(seating: Sequence[Player], seed: int) -> PlayersMap:
    """Shuffle seat order inside every table of four with one shared stream."""
    rng = SeededRandom(seed)
    result: PlayersMap = []
    for start in range(0, len(seating), TABLE_SIZE):
        result.extend(shuffle(seating[start : start + TABLE_SIZE], rng))
    return result
