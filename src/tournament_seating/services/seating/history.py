"""Per-player lookups and pairwise meeting history."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from itertools import combinations
from typing import Generic, TypeVar

from tournament_seating.models.seating import PreviousSeatings

V = TypeVar("V")


class IdIndex(Generic[V]):
    """Mapping over a sparse, fixed set of player IDs.

    IDs do not have to be contiguous. Values for IDs outside the set are
    never stored: ``set`` on an unknown ID is ignored and ``get`` raises
    ``KeyError``, so a typo cannot silently grow the index.

    Example:
        >>> tables = IdIndex([567, 345, 123], fill=None)
        >>> tables[123] = 2
        >>> tables[123]
        2
    """

    def __init__(self, ids: Iterable[int], fill: V) -> None:
        self._values: dict[int, V] = dict.fromkeys(ids, fill)

    def __getitem__(self, player_id: int) -> V:
        return self._values[player_id]

    def __setitem__(self, player_id: int, value: V) -> None:
        if player_id in self._values:
            self._values[player_id] = value

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def get(self, player_id: int, default: V | None = None) -> V | None:
        return self._values.get(player_id, default)

    def items(self) -> Iterator[tuple[int, V]]:
        return iter(self._values.items())

    def fill_with(self, pairs: Iterable[tuple[int, V]]) -> None:
        """Assign many ``(id, value)`` pairs at once."""
        for player_id, value in pairs:
            self[player_id] = value

    def all(self, predicate: Callable[[V], bool]) -> bool:
        return all(predicate(value) for value in self._values.values())


class PairHistory:
    """Symmetric counter of how often two players shared a table.

    Keys are unordered pairs, so ``get(a, b) == get(b, a)`` always holds.
    Counts never drop below zero.
    """

    def __init__(self) -> None:
        self._counts: dict[tuple[int, int], int] = {}

    @staticmethod
    def _key(a: int, b: int) -> tuple[int, int]:
        return (a, b) if a <= b else (b, a)

    @classmethod
    def from_seatings(cls, previous_seatings: PreviousSeatings) -> PairHistory:
        """Count every unordered pair of every historical table once."""
        history = cls()
        for table in previous_seatings:
            for a, b in combinations(table, 2):
                history.increment(a, b)
        return history

    def get(self, a: int, b: int) -> int:
        return self._counts.get(self._key(a, b), 0)

    def increment(self, a: int, b: int) -> None:
        key = self._key(a, b)
        self._counts[key] = self._counts.get(key, 0) + 1

    def decrement(self, a: int, b: int) -> None:
        key = self._key(a, b)
        current = self._counts.get(key, 0)
        if current <= 1:
            self._counts.pop(key, None)
        else:
            self._counts[key] = current - 1

    def crossings(self, player_id: int, others: Iterable[int]) -> int:
        """Total meetings of ``player_id`` with each of ``others``."""
        return sum(self.get(player_id, other) for other in others)

    def pairs(self) -> Iterator[tuple[int, int, int]]:
        """Yield ``(a, b, count)`` for every pair that has met, ``a <= b``."""
        for (a, b), count in sorted(self._counts.items()):
            yield a, b, count

    def __len__(self) -> int:
        return len(self._counts)
