"""Tournament Seating.

Seat players at tables of four across tournament rounds, keeping repeated
tablemates rare and seat positions balanced.
"""

from tournament_seating.models.seating import Player
from tournament_seating.services.seating import (
    make_intersections_table,
    make_interval_seating,
    make_shuffled_seating,
    make_swiss_seating,
)

__version__ = "0.3.0"
__all__ = [
    "Player",
    "__version__",
    "make_intersections_table",
    "make_interval_seating",
    "make_shuffled_seating",
    "make_swiss_seating",
]
