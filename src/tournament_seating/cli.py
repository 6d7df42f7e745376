"""CLI for tournament seating."""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import pydantic
import structlog
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from tournament_seating import __version__
from tournament_seating.core.config import SeatingConfig, load_config
from tournament_seating.core.errors import ConfigurationError
from tournament_seating.pipeline import run_seating
from tournament_seating.services.reporting import render_intersections, render_seating
from tournament_seating.services.validation import validate_seating_input

# Configure structlog
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

app = typer.Typer(
    name="tournament-seating",
    help="Tournament seating - assign players to tables of 4 avoiding repeated opponents",
    add_completion=False,
)
console = Console()


class AlgorithmChoice(str, Enum):
    swiss = "swiss"
    shuffled = "shuffled"
    interval = "interval"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"tournament-seating v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """Tournament seating CLI."""


def _apply_cli_overrides(
    config: SeatingConfig,
    groups: int | None,
    step: int | None,
) -> None:
    if groups is not None:
        config.groups_count = groups
    if step is not None:
        config.interval_step = step


@app.command()
def seat(
    config_path: Annotated[Path, typer.Argument(help="Path to seating YAML file")],
    algorithm: Annotated[
        AlgorithmChoice | None,
        typer.Option("--algorithm", "-a", help="Seating algorithm: swiss, shuffled or interval"),
    ] = None,
    seed: Annotated[int | None, typer.Option("--seed", help="Random seed override")] = None,
    groups: Annotated[
        int | None, typer.Option("--groups", min=1, help="Rating groups for shuffled seating")
    ] = None,
    step: Annotated[
        int | None, typer.Option("--step", min=1, help="Stride for interval seating")
    ] = None,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write the seating as JSON")
    ] = None,
    show_intersections: Annotated[
        bool, typer.Option("--show-intersections", help="Print pairs that met more than once")
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-V", help="Verbose output")] = False,
) -> None:
    """Seat one round of a tournament.

    Args:
        config_path: Path to YAML seating file.
        algorithm: Override configured algorithm.
        seed: Override configured seed.
        groups: Override rating groups count (shuffled seating).
        step: Override interval stride (interval seating).
        output: Optional JSON output path.
        show_intersections: Print repeated meetings after seating.
        verbose: Enable verbose logging.
    """
    # Configure logging level
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )

    try:
        console.print(f"[bold]Loading config:[/bold] {config_path}")
        config = load_config(config_path)
        _apply_cli_overrides(config, groups, step)

        result = run_seating(
            config, algorithm=algorithm.value if algorithm else None, seed=seed
        )

        console.print(
            f"\n[bold green]Seating ready[/bold green] ({result.algorithm}, seed {result.seed})\n"
        )
        console.print(render_seating(result.seating), markup=False)

        if show_intersections:
            console.print("\n[bold]Repeated meetings:[/bold]")
            console.print(render_intersections(result.intersections, min_count=2), markup=False)

        if output is not None:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(json.dumps(result.to_dict(), indent=2), encoding="utf-8")
            console.print(f"\nSeating saved to: {output}")

    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
    except ConfigurationError as e:
        console.print(f"[red]{e}")
        raise typer.Exit(1) from e
    except pydantic.ValidationError as e:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except Exception as e:
        console.print(f"[red]Unexpected error:[/red] {e}")
        if verbose:
            console.print_exception()
        raise typer.Exit(1) from e


@app.command()
def validate(
    config_path: Annotated[Path, typer.Argument(help="Path to seating YAML file")],
) -> None:
    """Validate a seating file without seating anyone.

    Args:
        config_path: Path to YAML seating file.
    """
    try:
        config = load_config(config_path)
        validate_seating_input(
            config.to_players(),
            config.previous_seatings,
            require_full_tables=config.algorithm != "interval",
        )
        console.print("[green]Configuration is valid![/green]")
        console.print(f"  Players: {len(config.players)}")
        console.print(f"  Tables: {config.tables_count}")
        console.print(f"  Previous tables: {len(config.previous_seatings)}")
        console.print(f"  Rounds played: {config.rounds_played}")
        console.print(f"  Algorithm: {config.algorithm}")
        console.print(f"  Seed: {config.seed}")

    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
    except ConfigurationError as e:
        console.print(f"[red]{e}")
        raise typer.Exit(1) from e
    except Exception as e:
        console.print(f"[red]Validation error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e


@app.command()
def info() -> None:
    """Show tool information and example commands."""
    console.print("[bold]Tournament Seating[/bold]")
    console.print(f"Version: {__version__}\n")

    console.print("[bold]Example Commands:[/bold]")
    console.print("  # Swiss seating for the next round")
    console.print("  tournament-seating seat round.yaml\n")

    console.print("  # Shuffle within 4 rating groups")
    console.print("  tournament-seating seat round.yaml --algorithm shuffled --groups 4\n")

    console.print("  # Interval seating, every second player")
    console.print("  tournament-seating seat round.yaml --algorithm interval --step 2\n")

    console.print("  # Save as JSON and list repeated meetings")
    console.print("  tournament-seating seat round.yaml -o seating.json --show-intersections\n")

    console.print("  # Validate input")
    console.print("  tournament-seating validate round.yaml")


if __name__ == "__main__":
    app()
