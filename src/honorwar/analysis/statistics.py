"""Aggregate statistics over a batch of simulated games."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
from scipy import stats

from honorwar.simulation.war import GameRecord, GameResult


@dataclass(frozen=True)
class BatchStatistics:
    """Outcome and length statistics for a batch of games."""
    total_games: int
    player1_wins: int
    player2_wins: int
    draws: int

    # Turn-count distribution
    mean_turns: float
    std_turns: float
    median_turns: float
    p90_turns: float
    max_turns: int

    mean_wars: float
    mean_honor_removals: float

    # (p1 - p2) / decisive games, in [-1, 1]
    first_player_advantage: float
    # Two-sided binomial test of player 1 wins among decisive games
    advantage_pvalue: float

    @property
    def player1_win_rate(self) -> float:
        return self.player1_wins / self.total_games

    @property
    def player2_win_rate(self) -> float:
        return self.player2_wins / self.total_games

    @property
    def draw_rate(self) -> float:
        return self.draws / self.total_games

    @property
    def advantage_is_significant(self) -> bool:
        """Returns True if the seat advantage is significant at p < 0.05."""
        return self.advantage_pvalue < 0.05


def compute_statistics(records: Sequence[GameRecord]) -> BatchStatistics:
    """
    Summarize a batch of game records.

    Raises:
        ValueError: If there are no records
    """
    if not records:
        raise ValueError("Cannot compute statistics for an empty batch")

    player1_wins = sum(1 for r in records if r.result is GameResult.PLAYER1)
    player2_wins = sum(1 for r in records if r.result is GameResult.PLAYER2)
    draws = len(records) - player1_wins - player2_wins

    turns = np.array([r.turns for r in records], dtype=float)
    wars = np.array([r.wars for r in records], dtype=float)
    removals = np.array([r.honor_removals for r in records], dtype=float)

    decisive = player1_wins + player2_wins
    if decisive > 0:
        advantage = (player1_wins - player2_wins) / decisive
        pvalue = float(stats.binomtest(player1_wins, decisive, p=0.5).pvalue)
    else:
        advantage = 0.0
        pvalue = 1.0

    return BatchStatistics(
        total_games=len(records),
        player1_wins=player1_wins,
        player2_wins=player2_wins,
        draws=draws,
        mean_turns=float(turns.mean()),
        std_turns=float(turns.std(ddof=1)) if len(turns) > 1 else 0.0,
        median_turns=float(np.median(turns)),
        p90_turns=float(np.percentile(turns, 90)),
        max_turns=int(turns.max()),
        mean_wars=float(wars.mean()),
        mean_honor_removals=float(removals.mean()),
        first_player_advantage=advantage,
        advantage_pvalue=pvalue,
    )
