"""Swiss seating: backtracking search that avoids repeated tablemates."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import structlog

from tournament_seating.models.seating import (
    TABLE_SIZE,
    Player,
    PlayersMap,
    PreviousSeatings,
    as_players,
)
from tournament_seating.services.seating.history import IdIndex, PairHistory
from tournament_seating.services.seating.rng import randomize_winds

logger = structlog.get_logger()

CALLS_PER_PRECISION_STEP = 15000


class SwissSolver:
    """Fill tables one seat at a time, highest rated player first.

    The search runs under a crossing budget. At a table that already has
    players, only the unseated players with the fewest meetings against the
    current tablemates are tried, and that meeting count is charged to the
    budget of the branch. When no complete seating fits the budget, the
    budget grows by one and the search restarts from scratch.

    Every ``CALLS_PER_PRECISION_STEP`` recursive calls the ``precision_factor``
    is raised by one. It widens the tolerance of every branch, which keeps
    deep searches from running unbounded before the outer relaxation catches up.

    Attributes:
        history: Pair history, mutated while seating and restored on backtrack.
        seated: Player id -> whether the player already has a seat.
        tables: Player id -> table index, ``None`` while unassigned.
        precision_factor: Extra tolerance accumulated from long searches.
    """

    def __init__(self, players: PlayersMap, history: PairHistory) -> None:
        self.ids = [p.id for p in players]
        self.history = history
        self.ratings: IdIndex[int] = IdIndex(self.ids, 0)
        self.ratings.fill_with((p.id, p.rating) for p in players)
        self.seated: IdIndex[bool] = IdIndex(self.ids, False)
        self.tables: IdIndex[int | None] = IdIndex(self.ids, None)
        self.precision_factor = 0
        self.calls = 0
        self.total_calls = 0
        self.attempts = 0

    def solve(self) -> IdIndex[int | None]:
        """Run the search with growing crossing budgets until it succeeds."""
        max_crossings = 0
        self.attempts = 1
        while not self._seat_next(max_crossings):
            max_crossings += 1
            self.attempts += 1
            logger.debug(
                "swiss_relaxation",
                max_crossings=max_crossings,
                precision_factor=self.precision_factor,
            )
        return self.tables

    def _tick(self) -> None:
        self.calls += 1
        self.total_calls += 1
        if self.calls > CALLS_PER_PRECISION_STEP:
            self.precision_factor += 1
            self.calls = 0
            logger.debug("swiss_precision_increased", precision_factor=self.precision_factor)

    def _seat_next(self, budget: int) -> bool:
        self._tick()

        if self.seated.all(bool):
            return True

        table, tablemates = self.current_table()

        # no table started yet, or the last one is full: open a new one
        if table is None or len(tablemates) == TABLE_SIZE:
            table = 0 if table is None else table + 1
            player_id = self.highest_rated_unseated()
            self.place(player_id, table, [])
            if self._seat_next(budget):
                return True
            self.unplace(player_id, [])
            return False

        crossings = {
            player_id: self.history.crossings(player_id, tablemates)
            for player_id in self.ids
            if not self.seated[player_id]
        }
        threshold = min(crossings.values())
        if threshold > budget + self.precision_factor:
            return False

        candidates = [pid for pid, count in crossings.items() if count <= threshold]
        candidates.sort(key=lambda pid: self.ratings[pid], reverse=True)

        child_budget = max(budget - threshold, 0)
        for player_id in candidates:
            self.place(player_id, table, tablemates)
            if self._seat_next(child_budget):
                return True
            self.unplace(player_id, tablemates)

        return False

    def current_table(self) -> tuple[int | None, list[int]]:
        """Return the highest table index in use and the players seated there."""
        max_table: int | None = None
        players_at_table: list[int] = []
        for player_id in self.ids:
            table = self.tables[player_id]
            if table is None:
                continue
            if max_table is None or table > max_table:
                max_table = table
                players_at_table = [player_id]
            elif table == max_table:
                players_at_table.append(player_id)
        return max_table, players_at_table

    def highest_rated_unseated(self) -> int:
        """First player in input order among the unseated with the top rating."""
        best_id: int | None = None
        for player_id in self.ids:
            if self.seated[player_id]:
                continue
            if best_id is None or self.ratings[player_id] > self.ratings[best_id]:
                best_id = player_id
        if best_id is None:
            msg = "No unseated players left"
            raise LookupError(msg)
        return best_id

    def place(self, player_id: int, table: int, tablemates: Iterable[int]) -> None:
        """Seat a player and record the new meetings."""
        self.seated[player_id] = True
        self.tables[player_id] = table
        for other in tablemates:
            self.history.increment(player_id, other)

    def unplace(self, player_id: int, tablemates: list[int]) -> None:
        """Exact inverse of ``place``, applied in reverse order."""
        for other in reversed(tablemates):
            self.history.decrement(player_id, other)
        self.tables[player_id] = None
        self.seated[player_id] = False


def make_swiss_seating(
    players: Sequence[Player | tuple[int, int]],
    previous_seatings: PreviousSeatings,
    seed: int,
) -> PlayersMap:
    """Seat players so that repeated tablemates are as rare as possible.

    Players are grouped by the Swiss search, tables are laid out in index
    order (players of one table keep their input order), then seats inside
    each table are randomised with ``seed``.

    Args:
        players: Players ordered as given by the caller; ``(id, rating)`` tuples
            are accepted.
        previous_seatings: Historical tables of four player IDs. Not modified.
        seed: Seed for the wind randomizer.

    Returns:
        Flat seating; every consecutive four players form a table.
    """
    roster = as_players(players)
    if not roster:
        return []

    logger.info("swiss_seating_start", players=len(roster), history=len(previous_seatings))
    solver = SwissSolver(roster, PairHistory.from_seatings(previous_seatings))
    tables = solver.solve()
    logger.info(
        "swiss_seating_complete",
        attempts=solver.attempts,
        calls=solver.total_calls,
        precision_factor=solver.precision_factor,
    )

    ordered = sorted(roster, key=lambda p: tables[p.id])
    return randomize_winds(ordered, seed)
