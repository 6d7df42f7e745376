"""Pipeline orchestration for tournament seating."""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from tournament_seating.core.config import Algorithm, SeatingConfig
from tournament_seating.models.seating import TABLE_SIZE, Intersection, PlayersMap, table_ids
from tournament_seating.services.seating import (
    make_intersections_table,
    make_interval_seating,
    make_shuffled_seating,
    make_swiss_seating,
    max_intersections,
)
from tournament_seating.services.validation import validate_seating_input

logger = structlog.get_logger()


@dataclass
class SeatingResult:
    """Outcome of one seating run."""

    algorithm: Algorithm
    seed: int
    seating: PlayersMap
    intersections: list[Intersection] = field(default_factory=list)

    @property
    def max_intersections(self) -> int:
        return max_intersections(self.intersections)

    def to_dict(self) -> dict:
        """JSON-ready representation."""
        return {
            "algorithm": self.algorithm,
            "seed": self.seed,
            "tables": table_ids(self.seating),
            "players": [{"id": p.id, "rating": p.rating} for p in self.seating],
            "intersections": [list(entry) for entry in self.intersections],
        }


class SeatingPipeline:
    """Validates a seating request, seats players and reports meetings."""

    def __init__(self, config: SeatingConfig) -> None:
        """Initialize the pipeline.

        Args:
            config: Seating configuration.
        """
        self.config = config
        self.players = config.to_players()

    def run(self) -> SeatingResult:
        """Execute the configured seating algorithm."""
        config = self.config
        logger.info(
            "pipeline_start",
            algorithm=config.algorithm,
            players=len(self.players),
            rounds_played=config.rounds_played,
        )

        if config.validate_input:
            # interval seating has its own rule for incomplete tables
            validate_seating_input(
                self.players,
                config.previous_seatings,
                require_full_tables=config.algorithm != "interval",
            )

        seating = self._seat()
        intersections = make_intersections_table(seating, config.previous_seatings)
        result = SeatingResult(
            algorithm=config.algorithm,
            seed=config.seed,
            seating=seating,
            intersections=intersections,
        )

        logger.info(
            "pipeline_complete",
            tables=len(seating) // TABLE_SIZE,
            max_intersections=result.max_intersections,
        )
        return result

    def _seat(self) -> PlayersMap:
        config = self.config
        if config.algorithm == "shuffled":
            return make_shuffled_seating(
                self.players, config.previous_seatings, config.groups_count, config.seed
            )
        if config.algorithm == "interval":
            return make_interval_seating(self.players, config.interval_step, config.seed)
        return make_swiss_seating(self.players, config.previous_seatings, config.seed)


def run_seating(
    config: SeatingConfig,
    algorithm: Algorithm | None = None,
    seed: int | None = None,
) -> SeatingResult:
    """Convenience function to seat one round.

    Args:
        config: Seating configuration.
        algorithm: Optional override of the configured algorithm.
        seed: Optional override of the configured seed.

    Returns:
        SeatingResult with seating and meeting counts.
    """
    update: dict[str, object] = {}
    if algorithm is not None:
        update["algorithm"] = algorithm
    if seed is not None:
        if seed < 0:
            msg = "seed must be non-negative"
            raise ValueError(msg)
        update["seed"] = seed

    effective_config = config.model_copy(update=update) if update else config
    return SeatingPipeline(effective_config).run()
