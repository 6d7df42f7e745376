from .cost import calculate_crossing_cost
from .history import IdIndex, PairHistory
from .intersections import make_intersections_table, max_intersections
from .interval import make_interval_seating
from .rng import SeededRandom, randomize_winds, shuffle
from .shuffled import make_shuffled_seating
from .swiss import SwissSolver, make_swiss_seating
from .winds import balance_winds, calculate_seat_balance

__all__ = [
    "IdIndex",
    "PairHistory",
    "SeededRandom",
    "SwissSolver",
    "balance_winds",
    "calculate_crossing_cost",
    "calculate_seat_balance",
    "make_interval_seating",
    "make_intersections_table",
    "make_shuffled_seating",
    "make_swiss_seating",
    "max_intersections",
    "randomize_winds",
    "shuffle",
]
