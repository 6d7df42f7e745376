"""Seating data model shared by all seating algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

TABLE_SIZE = 4


@dataclass(frozen=True)
class Player:
    """A tournament participant.

    Attributes:
        id: Unique player identifier within one invocation.
        rating: Signed rating, used only for ordering.
    """

    id: int
    rating: int = 0


PlayersMap = list[Player]
Table = list[int]
PreviousSeatings = Sequence[Sequence[int]]
Intersection = tuple[int, int, int]


def as_players(players: Iterable[Player | tuple[int, int]]) -> PlayersMap:
    """Normalise ``(id, rating)`` tuples into ``Player`` instances."""
    return [p if isinstance(p, Player) else Player(id=p[0], rating=p[1]) for p in players]


def split_tables(seating: Sequence[Player]) -> list[PlayersMap]:
    """Split a flat seating into consecutive tables of four (last may be short)."""
    return [list(seating[i : i + TABLE_SIZE]) for i in range(0, len(seating), TABLE_SIZE)]


def table_ids(seating: Sequence[Player]) -> list[Table]:
    """Reduce a flat seating to ID-only tables."""
    return [[p.id for p in table] for table in split_tables(seating)]
