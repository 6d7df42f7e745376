"""Configuration schemas and loading for tournament seating."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from tournament_seating.models.seating import TABLE_SIZE, Player, PlayersMap

MAX_SEED = (1 << 64) - 1

Algorithm = Literal["swiss", "shuffled", "interval"]


class PlayerConfig(BaseModel):
    """A registered player."""

    id: int = Field(..., ge=0)
    rating: int = 0

    def to_player(self) -> Player:
        return Player(id=self.id, rating=self.rating)


class SeatingConfig(BaseModel):
    """Complete seating request.

    Attributes:
        players: Registered players, best rated first for interval and
            shuffled seating.
        previous_seatings: Tables of earlier rounds, oldest first, each a
            list of 4 player IDs in seat order.
        algorithm: Seating algorithm ("swiss", "shuffled" or "interval").
        seed: Seed for every random choice; same seed, same seating.
        groups_count: Rating bands for shuffled seating.
        interval_step: Stride for interval seating.
        validate_input: Reject malformed players/history before seating.
    """

    players: list[PlayerConfig] = Field(default_factory=list)
    previous_seatings: list[list[int]] = Field(default_factory=list)
    algorithm: Algorithm = "swiss"
    seed: int = Field(default=42, ge=0, le=MAX_SEED)
    groups_count: int = Field(default=1, ge=1)
    interval_step: int = Field(default=1, ge=1)
    validate_input: bool = True

    @field_validator("players", mode="before")
    @classmethod
    def coerce_player_pairs(cls, v: Any) -> Any:
        """Accept ``[id, rating]`` pairs next to ``{id, rating}`` mappings."""
        if not isinstance(v, list):
            return v
        return [
            {"id": item[0], "rating": item[1]} if isinstance(item, list | tuple) else item
            for item in v
        ]

    def to_players(self) -> PlayersMap:
        """Convert configured players to seating players, keeping order."""
        return [p.to_player() for p in self.players]

    @property
    def tables_count(self) -> int:
        return calculate_tables_count(len(self.players))

    @property
    def rounds_played(self) -> int:
        """Number of rounds in history, assuming constant round size."""
        if self.tables_count == 0:
            return 0
        return len(self.previous_seatings) // self.tables_count


def load_config(path: str | Path) -> SeatingConfig:
    """Load and validate a seating request from a YAML file.

    Args:
        path: Path to YAML configuration file.

    Returns:
        Validated SeatingConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        pydantic.ValidationError: If config is invalid.
    """
    config_path = Path(path)
    if not config_path.exists():
        msg = f"Configuration file not found: {config_path}"
        raise FileNotFoundError(msg)

    with config_path.open() as f:
        data = yaml.safe_load(f)

    return SeatingConfig.model_validate(data or {})


def calculate_tables_count(num_players: int) -> int:
    """Number of full tables that ``num_players`` can fill."""
    return num_players // TABLE_SIZE
