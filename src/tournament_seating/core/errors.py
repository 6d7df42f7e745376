"""Custom exceptions for configuration and seating input errors."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Base exception for configuration errors with optional suggestions."""

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        self.message = message
        self.suggestion = suggestion
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"[Configuration Error] {self.message}"
        if self.suggestion:
            msg += f"\n[Suggestion] {self.suggestion}"
        return msg


class SeatingInputError(ConfigurationError):
    """Players or previous seatings cannot be seated as given."""


class DuplicatePlayerError(SeatingInputError):
    """Error when the same player ID is listed twice."""

    def __init__(self, player_id: int) -> None:
        self.player_id = player_id
        super().__init__(
            f"Player {player_id} is listed more than once",
            "Each player must appear exactly once in 'players'.",
        )


class PlayerCountError(SeatingInputError):
    """Error when players cannot be split into full tables."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            f"{count} players cannot be split into tables of 4",
            f"Remove {count % 4} player(s) or add {4 - count % 4} substitute(s).",
        )


class MisshapenHistoryError(SeatingInputError):
    """Error when a previous table does not hold four distinct players."""

    def __init__(self, index: int, table: list[int]) -> None:
        self.index = index
        self.table = table
        super().__init__(
            f"Previous table #{index} {table} must list 4 distinct player IDs",
        )


class UnknownPlayerError(SeatingInputError):
    """Error when history mentions a player who is not registered."""

    def __init__(self, player_id: int, index: int) -> None:
        self.player_id = player_id
        self.index = index
        super().__init__(
            f"Player {player_id} in previous table #{index} is not in 'players'",
            "Register the player or remove the table from previous seatings.",
        )
