"""Tests for the command line interface."""

import json
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from tournament_seating import __version__
from tournament_seating.cli import app

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path: Path, eight_players, eight_player_history) -> Path:
    """Seating request for eight players on disk."""
    path = tmp_path / "round.yaml"
    data = {
        "players": [[p.id, p.rating] for p in eight_players],
        "previous_seatings": eight_player_history,
        "seed": 12345,
    }
    path.write_text(yaml.safe_dump(data))
    return path


class TestCli:
    """Tests for CLI commands."""

    def test_version(self):
        """Test --version prints the package version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_info(self):
        """Test info lists example commands."""
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "Tournament Seating" in result.output

    def test_validate_ok(self, config_file: Path):
        """Test a valid file is reported as such."""
        result = runner.invoke(app, ["validate", str(config_file)])
        assert result.exit_code == 0
        assert "Configuration is valid!" in result.output
        assert "Rounds played: 2" in result.output

    def test_validate_unknown_player(self, tmp_path: Path):
        """Test history with unregistered players fails validation."""
        path = tmp_path / "bad.yaml"
        path.write_text(
            yaml.safe_dump(
                {"players": [[1, 0], [2, 0], [3, 0], [4, 0]], "previous_seatings": [[1, 2, 3, 99]]}
            )
        )
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 1
        assert "Configuration Error" in result.output

    def test_validate_missing_file(self, tmp_path: Path):
        """Test a missing file exits with an error."""
        result = runner.invoke(app, ["validate", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 1

    def test_seat_writes_json(self, config_file: Path, tmp_path: Path):
        """Test seating is written as JSON tables."""
        output = tmp_path / "out" / "seating.json"
        result = runner.invoke(app, ["seat", str(config_file), "--output", str(output)])

        assert result.exit_code == 0
        data = json.loads(output.read_text())
        assert data["algorithm"] == "swiss"
        assert data["seed"] == 12345
        assert sorted(pid for table in data["tables"] for pid in table) == list(range(1, 9))

    def test_seat_overrides(self, config_file: Path):
        """Test algorithm, seed and groups can be set from the command line."""
        result = runner.invoke(
            app,
            [
                "seat",
                str(config_file),
                "--algorithm",
                "shuffled",
                "--groups",
                "2",
                "--seed",
                "3",
                "--show-intersections",
            ],
        )
        assert result.exit_code == 0
        assert "shuffled" in result.output
        assert "Repeated meetings" in result.output

    def test_seat_rejects_bad_player_count(self, tmp_path: Path):
        """Test swiss seating refuses incomplete tables."""
        path = tmp_path / "six.yaml"
        path.write_text(yaml.safe_dump({"players": [[i, 0] for i in range(1, 7)]}))
        result = runner.invoke(app, ["seat", str(path)])
        assert result.exit_code == 1
