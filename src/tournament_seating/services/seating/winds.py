"""Seat ("wind") balancing for finished tables."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations

from tournament_seating.models.seating import (
    TABLE_SIZE,
    Player,
    PlayersMap,
    PreviousSeatings,
    split_tables,
)

# Fixed enumeration order; ties between permutations go to the earliest entry.
POSSIBLE_PLACEMENTS: tuple[tuple[int, int, int, int], ...] = (
    (0, 1, 2, 3),
    (1, 0, 2, 3),
    (2, 0, 1, 3),
    (3, 0, 1, 2),
    (0, 1, 3, 2),
    (1, 0, 3, 2),
    (2, 0, 3, 1),
    (3, 0, 2, 1),
    (0, 2, 1, 3),
    (1, 2, 0, 3),
    (2, 1, 0, 3),
    (3, 1, 0, 2),
    (0, 2, 3, 1),
    (1, 2, 3, 0),
    (2, 1, 3, 0),
    (3, 1, 2, 0),
    (0, 3, 1, 2),
    (1, 3, 0, 2),
    (2, 3, 0, 1),
    (3, 2, 0, 1),
    (0, 3, 2, 1),
    (1, 3, 2, 0),
    (2, 3, 1, 0),
    (3, 2, 1, 0),
)


def seat_histogram(
    player_id: int, seat: int, previous_seatings: PreviousSeatings
) -> list[int]:
    """Count past seats of a player, plus the hypothetical ``seat``."""
    buckets = [0] * TABLE_SIZE
    buckets[seat] += 1
    for table in previous_seatings:
        for position, other in enumerate(table[:TABLE_SIZE]):
            if other == player_id:
                buckets[position] += 1
                break
    return buckets


def calculate_seat_balance(
    player_ids: Sequence[int], previous_seatings: PreviousSeatings
) -> int:
    """Seat-distribution unevenness for players sitting at seats 0..3 in order.

    For each player the pairwise absolute differences between the four seat
    buckets are summed; the table cost is the sum over its players.
    """
    total = 0
    for seat, player_id in enumerate(player_ids):
        buckets = seat_histogram(player_id, seat, previous_seatings)
        total += sum(abs(a - b) for a, b in combinations(buckets, 2))
    return total


def best_table_placement(
    table: Sequence[Player], previous_seatings: PreviousSeatings
) -> PlayersMap:
    """Pick the seat order of one table with the lowest balance cost."""
    best_cost: int | None = None
    best: PlayersMap = list(table)
    for placement in POSSIBLE_PLACEMENTS:
        candidate = [table[idx] for idx in placement]
        cost = calculate_seat_balance([p.id for p in candidate], previous_seatings)
        if best_cost is None or cost < best_cost:
            best_cost = cost
            best = candidate
    return best


def balance_winds(seating: Sequence[Player], previous_seatings: PreviousSeatings) -> PlayersMap:
    """Reorder every table so players drift towards seats they rarely had.

    A trailing table with fewer than four players is left as is.
    """
    result: PlayersMap = []
    for table in split_tables(seating):
        if len(table) < TABLE_SIZE:
            result.extend(table)
            continue
        result.extend(best_table_placement(table, previous_seatings))
    return result
