"""Output generation for batch results (terminal, JSON)."""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path

from honorwar.analysis.statistics import BatchStatistics
from honorwar.simulation.batch import BatchConfig


def _format_pvalue(pvalue: float) -> str:
    if pvalue < 0.001:
        return "p < 0.001"
    if pvalue < 0.01:
        return "p < 0.01"
    if pvalue < 0.05:
        return "p < 0.05"
    return f"p = {pvalue:.3f}"


def print_summary(stats: BatchStatistics, config: BatchConfig) -> None:
    """Print human-readable batch summary."""
    print("\n" + "=" * 50)
    print("War Simulation Report")
    print("=" * 50)
    print(f"Games: {stats.total_games}  (k={config.params.k}, "
          f"honor_threshold={config.params.honor_threshold}, seed={config.seed})")

    print("\n--- Outcomes ---")
    print(f"  Player 1 wins: {stats.player1_wins} ({stats.player1_win_rate:.1%})")
    print(f"  Player 2 wins: {stats.player2_wins} ({stats.player2_win_rate:.1%})")
    print(f"  Draws:         {stats.draws} ({stats.draw_rate:.1%})")

    sig_label = "SIGNIFICANT" if stats.advantage_is_significant else "not significant"
    print(f"  First player advantage: {stats.first_player_advantage:+.3f} "
          f"({_format_pvalue(stats.advantage_pvalue)}, {sig_label})")

    print("\n--- Game Length ---")
    print(f"  Turns: {stats.mean_turns:.1f} +/- {stats.std_turns:.1f}")
    print(f"  Median: {stats.median_turns:.0f}  90th percentile: {stats.p90_turns:.0f}  "
          f"Max: {stats.max_turns}")
    print(f"  Wars per game: {stats.mean_wars:.2f}")
    if config.params.honor_threshold > 0:
        print(f"  Honor removals per game: {stats.mean_honor_removals:.2f}")
    print()


def save_json(stats: BatchStatistics, config: BatchConfig, output_path: Path) -> None:
    """Save batch configuration and statistics as JSON."""
    data = {
        "metadata": {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "config": {
                "num_games": config.num_games,
                "k": config.params.k,
                "honor_threshold": config.params.honor_threshold,
                "seed": config.seed,
                "copies": config.copies,
            },
        },
        "statistics": asdict(stats),
    }

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(data, f, indent=2)
