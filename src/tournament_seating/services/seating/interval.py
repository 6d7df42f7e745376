"""Interval seating: deterministic striding through the rating list."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from tournament_seating.models.seating import (
    TABLE_SIZE,
    Player,
    PlayersMap,
    as_players,
)
from tournament_seating.services.seating.rng import randomize_winds


@dataclass
class RatedTable:
    """A completed table and the best rating sitting at it."""

    players: PlayersMap = field(default_factory=list)

    @property
    def max_rating(self) -> int:
        return max(p.rating for p in self.players)


def make_interval_seating(
    players: Sequence[Player | tuple[int, int]],
    step: int,
    seed: int,
) -> PlayersMap:
    """Seat players from the top of the rating list with a stride of ``step``.

    With 8 tables and ``step=2``, table 1 gets places 1, 3, 5, 7, table 2
    gets places 9, 11, 13, 15 and so on, then the even places follow. When
    the table count is not divisible by ``step``, the bottom
    ``4 * (tables % step)`` players are seated with a stride of 1.

    Tables are ordered by their best rating, then seats are randomised.
    Players who do not fill a complete table are left out.

    Args:
        players: Players ordered by rating, best first.
        step: Stride between tablemates in the rating list.
        seed: Seed for the wind randomizer.

    Returns:
        Flat seating; every consecutive four players form a table.
    """
    if step < 1:
        msg = f"step must be at least 1, got {step}"
        raise ValueError(msg)

    roster = as_players(players)
    tables: list[RatedTable] = []
    current = RatedTable()

    def take(player: Player) -> None:
        nonlocal current
        current.players.append(player)
        if len(current.players) == TABLE_SIZE:
            tables.append(current)
            current = RatedTable()

    no_interval_count = TABLE_SIZE * ((len(roster) // TABLE_SIZE) % step)
    with_interval_count = len(roster) - no_interval_count

    for offset in range(step):
        for idx in range(offset, with_interval_count, step):
            take(roster[idx])

    for idx in range(with_interval_count, len(roster)):
        take(roster[idx])

    tables.sort(key=lambda t: t.max_rating, reverse=True)
    flattened = [player for table in tables for player in table.players]
    return randomize_winds(flattened, seed)
