# src/honorwar/cli/simulate.py
"""CLI command for running batches of War games."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from honorwar.analysis.report import print_summary, save_json
from honorwar.analysis.statistics import compute_statistics
from honorwar.simulation.batch import BatchConfig, run_batch
from honorwar.simulation.war import Params

logger = logging.getLogger(__name__)


@click.command()
@click.option("-n", "--games", type=int, default=1000, show_default=True, help="Number of games to simulate")
@click.option("-k", "k", type=int, default=3, show_default=True, help="Face-down cards each side wagers in a war")
@click.option(
    "-t", "--honor-threshold",
    type=int,
    default=0,
    show_default=True,
    help="A card losing by this margin or less is removed from the game (0 disables)",
)
@click.option("--seed", type=int, default=42, show_default=True, help="Base random seed (game i uses seed + i)")
@click.option("-w", "--workers", type=int, default=None, help="Worker threads (default: min(cpu_count, 8))")
@click.option("--copies", type=int, default=4, show_default=True, help="Copies of each rank in the deck")
@click.option("-o", "--output", type=click.Path(), default=None, help="Save statistics as JSON")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
def main(
    games: int,
    k: int,
    honor_threshold: int,
    seed: int,
    workers: int | None,
    copies: int,
    output: str | None,
    verbose: bool,
):
    """Simulate many games of War and report outcome statistics."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    try:
        params = Params(k=k, honor_threshold=honor_threshold)
        config = BatchConfig(
            num_games=games,
            params=params,
            seed=seed,
            num_workers=workers,
            copies=copies,
        )
    except ValueError as e:
        raise click.UsageError(str(e)) from e

    records = run_batch(config)
    stats = compute_statistics(records)
    print_summary(stats, config)

    if output:
        out_path = Path(output)
        save_json(stats, config, out_path)
        click.echo(f"Saved statistics to {out_path}")


if __name__ == "__main__":
    main()
