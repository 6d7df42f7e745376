from tournament_seating.models.seating import (
    TABLE_SIZE,
    Intersection,
    Player,
    PlayersMap,
    PreviousSeatings,
    Table,
    as_players,
    split_tables,
    table_ids,
)

__all__ = [
    "TABLE_SIZE",
    "Intersection",
    "Player",
    "PlayersMap",
    "PreviousSeatings",
    "Table",
    "as_players",
    "split_tables",
    "table_ids",
]
