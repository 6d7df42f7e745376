"""Core configuration and errors for tournament seating."""

from tournament_seating.core.config import (
    PlayerConfig,
    SeatingConfig,
    calculate_tables_count,
    load_config,
)
from tournament_seating.core.errors import (
    ConfigurationError,
    DuplicatePlayerError,
    MisshapenHistoryError,
    PlayerCountError,
    SeatingInputError,
    UnknownPlayerError,
)

__all__ = [
    "PlayerConfig",
    "SeatingConfig",
    "calculate_tables_count",
    "load_config",
    "ConfigurationError",
    "DuplicatePlayerError",
    "MisshapenHistoryError",
    "PlayerCountError",
    "SeatingInputError",
    "UnknownPlayerError",
]
