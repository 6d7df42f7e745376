"""Crossing cost used to compare candidate seatings."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence
from itertools import permutations

from tournament_seating.models.seating import (
    TABLE_SIZE,
    Player,
    PreviousSeatings,
    Table,
    table_ids,
)

REPEAT_PENALTY = 1
CONSECUTIVE_PENALTY = 10


def group_into_rounds(
    previous_seatings: PreviousSeatings, tables_per_round: int
) -> list[list[Table]]:
    """Chunk flat history into rounds of ``tables_per_round`` tables.

    Assumes every past round had the same number of tables as the current one.
    """
    size = max(tables_per_round, 1)
    return [
        [list(table) for table in previous_seatings[i : i + size]]
        for i in range(0, len(previous_seatings), size)
    ]


def calculate_crossing_cost(
    seating: Sequence[Player], previous_seatings: PreviousSeatings
) -> int:
    """Score how bad a seating is with respect to history. Lower is better.

    Every pair of players that ends up sharing tables in two or more rounds
    costs ``REPEAT_PENALTY``; each time those rounds are back to back adds
    ``CONSECUTIVE_PENALTY``. The new seating counts as the last round.

    Args:
        seating: Candidate seating, consecutive fours forming tables.
        previous_seatings: Historical tables, oldest first.

    Returns:
        Non-negative integer cost.
    """
    new_round = table_ids(seating)
    rounds = group_into_rounds(previous_seatings, len(seating) // TABLE_SIZE)
    rounds.append(new_round)

    crossings: dict[tuple[int, int], list[int]] = defaultdict(list)
    for round_idx, tables in enumerate(rounds):
        for table in tables:
            for a, b in permutations(table, 2):
                crossings[(a, b)].append(round_idx)

    cost = 0
    for rounds_met in crossings.values():
        if len(rounds_met) <= 1:
            continue
        cost += REPEAT_PENALTY
        rounds_met.sort()
        for earlier, later in zip(rounds_met, rounds_met[1:]):
            if later - earlier == 1:
                cost += CONSECUTIVE_PENALTY

    # each unordered pair was counted from both sides
    return cost // 2
