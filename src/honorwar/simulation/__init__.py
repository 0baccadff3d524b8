"""War game engine and batch simulation."""

from honorwar.simulation.deck import PlayerDeck, Shuffler, split_deck, standard_deck
from honorwar.simulation.war import (
    Game,
    GameRecord,
    GameResult,
    Params,
    Player,
    WagerInvariantError,
    play_war_game,
)
from honorwar.simulation.batch import BatchConfig, run_batch, simulate_game

__all__ = [
    # Decks
    "PlayerDeck",
    "Shuffler",
    "split_deck",
    "standard_deck",
    # Engine
    "Game",
    "GameRecord",
    "GameResult",
    "Params",
    "Player",
    "WagerInvariantError",
    "play_war_game",
    # Batches
    "BatchConfig",
    "run_batch",
    "simulate_game",
]
