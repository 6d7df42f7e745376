"""Input checks run before seating; the algorithms themselves trust their input."""

from __future__ import annotations

from collections.abc import Sequence

from tournament_seating.core.errors import (
    DuplicatePlayerError,
    MisshapenHistoryError,
    PlayerCountError,
    UnknownPlayerError,
)
from tournament_seating.models.seating import TABLE_SIZE, Player, PreviousSeatings


def validate_seating_input(
    players: Sequence[Player],
    previous_seatings: PreviousSeatings,
    require_full_tables: bool = True,
) -> None:
    """Reject players and history the seating algorithms are not defined for.

    An empty player list is valid and simply yields an empty seating.

    Raises:
        DuplicatePlayerError: A player ID is listed twice.
        PlayerCountError: Player count is not a multiple of 4.
        MisshapenHistoryError: A previous table is not 4 distinct IDs.
        UnknownPlayerError: History mentions an unregistered player.
    """
    known: set[int] = set()
    for player in players:
        if player.id in known:
            raise DuplicatePlayerError(player.id)
        known.add(player.id)

    if require_full_tables and len(players) % TABLE_SIZE != 0:
        raise PlayerCountError(len(players))

    for index, table in enumerate(previous_seatings):
        if len(table) != TABLE_SIZE or len(set(table)) != TABLE_SIZE:
            raise MisshapenHistoryError(index, list(table))
        for player_id in table:
            if player_id not in known:
                raise UnknownPlayerError(player_id, index)
