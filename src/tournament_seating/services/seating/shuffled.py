"""Shuffled seating: randomized local search over rating groups."""

from __future__ import annotations

import math
from collections.abc import Sequence

import structlog

from tournament_seating.models.seating import (
    TABLE_SIZE,
    Player,
    PlayersMap,
    PreviousSeatings,
    as_players,
)
from tournament_seating.services.seating.cost import calculate_crossing_cost
from tournament_seating.services.seating.rng import SeededRandom, shuffle
from tournament_seating.services.seating.winds import balance_winds

logger = structlog.get_logger()

MAX_ITERATIONS = 1000
TRIAL_SEED_STEP = 17


def split_into_groups(players: PlayersMap, groups_count: int) -> list[PlayersMap]:
    """Cut players into ``groups_count`` contiguous chunks of equal size.

    Chunk size is rounded up, so the last chunk may be smaller and fewer
    chunks than requested may come out.
    """
    if groups_count < 1:
        msg = f"groups_count must be at least 1, got {groups_count}"
        raise ValueError(msg)
    group_size = math.ceil(len(players) / groups_count)
    return [players[i : i + group_size] for i in range(0, len(players), group_size)]


def make_shuffled_seating(
    players: Sequence[Player | tuple[int, int]],
    previous_seatings: PreviousSeatings,
    groups_count: int,
    seed: int,
) -> PlayersMap:
    """Shuffle players within rating groups, keeping the least repetitive result.

    Each of ``MAX_ITERATIONS`` trials reseeds the generator with
    ``seed + trial * TRIAL_SEED_STEP`` and reshuffles every group in place
    (shuffles accumulate from trial to trial). The concatenated groups are
    scored with ``calculate_crossing_cost``; the first seating reaching the
    lowest cost wins. Seats are then balanced with ``balance_winds``.

    Placement takes history into account, so this is not a fair random draw.

    Args:
        players: Rating-ordered players; ``(id, rating)`` tuples are accepted.
        previous_seatings: Historical tables of four player IDs.
        groups_count: Number of rating bands to shuffle independently.
        seed: Base seed of the trials.

    Returns:
        Flat seating; every consecutive four players form a table.
    """
    roster = as_players(players)
    if not roster:
        return []

    tables_per_round = len(roster) // TABLE_SIZE
    if tables_per_round and len(previous_seatings) % tables_per_round:
        logger.warning(
            "history_not_whole_rounds",
            previous_tables=len(previous_seatings),
            tables_per_round=tables_per_round,
        )

    groups = split_into_groups(roster, groups_count)
    best_seating: PlayersMap = []
    best_cost: int | None = None
    best_trial = -1

    for trial in range(MAX_ITERATIONS):
        rng = SeededRandom(seed + trial * TRIAL_SEED_STEP)
        groups = [shuffle(group, rng) for group in groups]
        candidate = [player for group in groups for player in group]

        cost = calculate_crossing_cost(candidate, previous_seatings)
        if best_cost is None or cost < best_cost:
            best_cost = cost
            best_seating = candidate
            best_trial = trial

    logger.info(
        "shuffled_seating_complete",
        players=len(roster),
        groups=len(groups),
        best_cost=best_cost,
        best_trial=best_trial,
    )
    return balance_winds(best_seating, previous_seatings)
