"""Shared fixtures for seating tests."""

import pytest

from tournament_seating.models import Player

TOURNAMENT_PLAYERS = [
    (1, -1200),
    (2, 9200),
    (3, -13700),
    (4, 4400),
    (5, -27400),
    (6, 10500),
    (7, -29500),
    (8, -8000),
    (9, -23700),
    (10, -9000),
    (11, 1900),
    (12, -38200),
    (13, -1000),
    (14, 13400),
    (15, -34900),
    (16, -19200),
    (17, 8500),
    (18, 11700),
    (19, -32100),
    (20, -4700),
    (21, -15100),
    (22, -2000),
    (23, -25700),
    (24, 21400),
    (25, 40000),
    (26, 64200),
    (27, -14700),
    (28, 49500),
    (29, 35400),
    (30, 1900),
    (31, 59400),
    (32, -31300),
]

FOUR_ROUNDS = [
    # round 1
    [1, 2, 3, 4],
    [5, 6, 7, 8],
    [9, 10, 11, 12],
    [13, 14, 15, 16],
    [17, 18, 19, 20],
    [21, 22, 23, 24],
    [25, 26, 27, 28],
    [29, 30, 31, 32],
    # round 2
    [1, 5, 9, 13],
    [2, 6, 10, 14],
    [3, 7, 11, 15],
    [4, 8, 12, 16],
    [17, 21, 25, 29],
    [18, 22, 26, 30],
    [19, 23, 27, 31],
    [20, 24, 28, 32],
    # round 3
    [26, 14, 31, 24],
    [29, 28, 18, 6],
    [25, 11, 30, 2],
    [4, 22, 13, 17],
    [20, 1, 8, 10],
    [27, 16, 21, 3],
    [7, 9, 23, 32],
    [5, 12, 19, 15],
    # round 4
    [13, 26, 29, 2],
    [11, 28, 17, 31],
    [18, 24, 4, 25],
    [1, 27, 30, 14],
    [9, 6, 15, 22],
    [21, 12, 20, 7],
    [3, 32, 8, 19],
    [16, 5, 10, 23],
]

EIGHT_PLAYERS = [
    (1, -1200),
    (2, 9200),
    (3, -13700),
    (4, 4400),
    (5, -27400),
    (6, 10500),
    (7, -29500),
    (8, -8000),
]

EIGHT_PLAYER_HISTORY = [
    [1, 2, 3, 4],
    [5, 6, 7, 8],
    [1, 3, 5, 7],
    [2, 4, 6, 8],
]


@pytest.fixture
def tournament_players():
    """32 players of a real tournament, unsorted."""
    return [Player(id=pid, rating=rating) for pid, rating in TOURNAMENT_PLAYERS]


@pytest.fixture
def four_rounds():
    """Four completed rounds for the 32 tournament players."""
    return [list(table) for table in FOUR_ROUNDS]


@pytest.fixture
def eight_players():
    return [Player(id=pid, rating=rating) for pid, rating in EIGHT_PLAYERS]


@pytest.fixture
def eight_player_history():
    return [list(table) for table in EIGHT_PLAYER_HISTORY]
