"""Text reports for seatings and meeting counts."""

from __future__ import annotations

from collections.abc import Sequence

from tabulate import tabulate

from tournament_seating.models.seating import TABLE_SIZE, Intersection, Player, split_tables

SEAT_HEADERS = tuple(f"Seat {seat}" for seat in range(TABLE_SIZE))


def render_seating(seating: Sequence[Player]) -> str:
    """Render a seating as a markdown table, one row per table.

    Args:
        seating: Flat seating, consecutive fours forming tables.

    Returns:
        Markdown table with columns ``Table, Seat 0..3``.
    """
    rows = []
    for number, table in enumerate(split_tables(seating), start=1):
        cells = [f"{p.id} ({p.rating})" for p in table]
        cells.extend([""] * (TABLE_SIZE - len(cells)))
        rows.append((number, *cells))
    return tabulate(rows, headers=("Table", *SEAT_HEADERS), tablefmt="github")


def render_intersections(intersections: Sequence[Intersection], min_count: int = 1) -> str:
    """Render meeting counts, most frequent first.

    Args:
        intersections: ``(id_a, id_b, count)`` entries.
        min_count: Hide pairs that met fewer times than this.

    Returns:
        Markdown table with columns ``Player A, Player B, Games together``.
    """
    rows = sorted(
        (entry for entry in intersections if entry[2] >= min_count),
        key=lambda entry: (-entry[2], entry[0], entry[1]),
    )
    return tabulate(rows, headers=("Player A", "Player B", "Games together"), tablefmt="github")
