"""Tests for the simulate CLI command."""

import json

from click.testing import CliRunner

from honorwar.cli.simulate import main


def test_simulate_runs() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["--games", "5", "--seed", "1", "--workers", "1"])

    assert result.exit_code == 0, result.output
    assert "War Simulation Report" in result.output
    assert "Games: 5" in result.output


def test_simulate_with_variants() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["-n", "5", "-k", "1", "-t", "2", "-w", "2"])

    assert result.exit_code == 0, result.output
    assert "k=1, honor_threshold=2" in result.output


def test_simulate_writes_json(tmp_path) -> None:
    out_path = tmp_path / "stats.json"
    runner = CliRunner()
    result = runner.invoke(main, ["-n", "4", "-w", "1", "-o", str(out_path)])

    assert result.exit_code == 0, result.output
    data = json.loads(out_path.read_text())
    assert data["statistics"]["total_games"] == 4
    assert data["metadata"]["config"]["k"] == 3


def test_simulate_rejects_negative_k() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["-k", "-1"])

    assert result.exit_code == 2
    assert "k must be non-negative" in result.output


def test_simulate_rejects_zero_games() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["--games", "0"])

    assert result.exit_code == 2
