"""Tests for IdIndex and PairHistory."""

import pytest

from tournament_seating.services.seating.history import IdIndex, PairHistory
from tournament_seating.services.seating.rng import SeededRandom


class TestIdIndex:
    """Tests for the sparse ID index."""

    def test_fill_value(self):
        """Test every ID starts with the fill value."""
        index = IdIndex([567, 345, 123], 2)
        assert index[123] == 2
        assert index[567] == 2
        assert len(index) == 3

    def test_set_value(self):
        """Test values can be overwritten per ID."""
        index = IdIndex([567, 345, 123], 2)
        index[123] = 3
        index[567] = 4
        assert index[123] == 3
        assert index[567] == 4
        assert index[345] == 2

    def test_unknown_id_is_ignored_on_set(self):
        """Test setting an unregistered ID does not grow the index."""
        index = IdIndex([1, 2], 0)
        index[3] = 5
        assert 3 not in index
        assert len(index) == 2

    def test_unknown_id_raises_on_get(self):
        """Test reading an unregistered ID raises KeyError."""
        index = IdIndex([1, 2], 0)
        with pytest.raises(KeyError):
            index[3]
        assert index.get(3) is None

    def test_fill_with_and_all(self):
        """Test bulk assignment and predicate checks."""
        index = IdIndex([1, 2, 3, 4], False)
        index.fill_with([(1, True), (2, True), (3, True)])
        assert not index.all(bool)
        index[4] = True
        assert index.all(bool)

    def test_iteration_keeps_insertion_order(self):
        """Test iteration yields IDs in the order given."""
        index = IdIndex([30, 10, 20], None)
        assert list(index) == [30, 10, 20]
        assert dict(index.items()) == {30: None, 10: None, 20: None}


class TestPairHistory:
    """Tests for the symmetric meeting counter."""

    def test_from_seatings(self, eight_player_history):
        """Test counts built from previous tables."""
        history = PairHistory.from_seatings(eight_player_history)

        assert history.get(1, 2) == 1
        assert history.get(1, 3) == 2
        assert history.get(2, 3) == 1
        assert history.get(2, 4) == 2
        assert history.get(2, 1) == 1
        assert history.get(3, 1) == 2
        assert history.get(3, 2) == 1
        assert history.get(4, 2) == 2
        assert history.get(1, 6) == 0

    def test_increment_and_decrement(self):
        """Test counts move in both directions."""
        history = PairHistory()
        history.increment(5, 6)
        history.increment(6, 5)
        assert history.get(5, 6) == 2
        history.decrement(5, 6)
        assert history.get(6, 5) == 1

    def test_decrement_never_negative(self):
        """Test decrementing an unseen pair keeps it at zero."""
        history = PairHistory()
        history.decrement(1, 2)
        history.decrement(1, 2)
        assert history.get(1, 2) == 0
        assert len(history) == 0

    def test_symmetry_under_random_updates(self):
        """Test get(a, b) == get(b, a) after arbitrary updates."""
        rng = SeededRandom(2024)
        history = PairHistory()
        for _ in range(500):
            a = rng.randbelow(10)
            b = rng.randbelow(10)
            if rng.randbelow(3) == 0:
                history.decrement(a, b)
            else:
                history.increment(a, b)

        for a in range(10):
            for b in range(10):
                assert history.get(a, b) == history.get(b, a)
                assert history.get(a, b) >= 0

    def test_crossings(self, eight_player_history):
        """Test summed meetings against a group of players."""
        history = PairHistory.from_seatings(eight_player_history)
        # player 6 met 5, 7, 8 in one table and 2, 4, 8 in another
        assert history.crossings(6, [5, 8]) == 3
        assert history.crossings(6, [1, 3]) == 0

    def test_pairs_sorted(self):
        """Test pairs are reported with the smaller ID first."""
        history = PairHistory.from_seatings([[4, 3, 2, 1]])
        assert list(history.pairs()) == [
            (1, 2, 1),
            (1, 3, 1),
            (1, 4, 1),
            (2, 3, 1),
            (2, 4, 1),
            (3, 4, 1),
        ]
