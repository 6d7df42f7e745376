"""Post-hoc report of how often players have met."""

from __future__ import annotations

from collections.abc import Sequence

from tournament_seating.models.seating import (
    Intersection,
    Player,
    PreviousSeatings,
    table_ids,
)

SEAT_PAIRS = ((0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3))


def make_intersections_table(
    seating: Sequence[Player], previous_seatings: PreviousSeatings
) -> list[Intersection]:
    """Count meetings per seat-ordered pair across history plus ``seating``.

    Pairs are keyed in the order the two players sat at a table, so ``(a, b)``
    and ``(b, a)`` are reported separately. Entries appear in first-seen order.

    Returns:
        List of ``(id_a, id_b, count)``.
    """
    counts: dict[tuple[int, int], int] = {}
    all_tables = [list(table) for table in previous_seatings] + table_ids(seating)
    for table in all_tables:
        for i, j in SEAT_PAIRS:
            if j >= len(table):
                continue
            key = (table[i], table[j])
            counts[key] = counts.get(key, 0) + 1
    return [(a, b, count) for (a, b), count in counts.items()]


def max_intersections(intersections: Sequence[Intersection]) -> int:
    """Largest meeting count in a report, 0 when empty."""
    return max((count for _, _, count in intersections), default=0)
