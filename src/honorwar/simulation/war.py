"""War game simulation with configurable war depth and honor rule."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import List, Optional, Sequence, Tuple, Union

from honorwar.simulation.deck import (
    MAX_RANK,
    PlayerDeck,
    Rank,
    Shuffler,
    split_deck,
    standard_deck,
)

logger = logging.getLogger(__name__)


class Player(Enum):
    """One of the two seats."""

    PLAYER1 = 1
    PLAYER2 = 2


class GameResult(Enum):
    """Winner of a game (rounds repeated until one player holds every card).

    A game draws if both players flip their last card in a war.
    """

    PLAYER1 = "player1"
    PLAYER2 = "player2"
    DRAW = "draw"


@dataclass(frozen=True)
class RoundWin:
    """Decisive, non-terminal round outcome."""

    player: Player


RoundResult = Union[GameResult, RoundWin]


class WagerInvariantError(RuntimeError):
    """A war wager draw found no card even though the cap allowed it."""
    pass


@dataclass(frozen=True)
class Params:
    """Rule variant parameters."""

    k: int = 3  # Cards each side flips face-down in a war
    honor_threshold: int = 0  # A card losing by this much or less leaves the game

    def __post_init__(self) -> None:
        for name in ("k", "honor_threshold"):
            value = getattr(self, name)
            if not isinstance(value, Integral):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if self.k < 0:
            raise ValueError(f"k must be non-negative, got {self.k}")
        if not 0 <= self.honor_threshold <= MAX_RANK:
            raise ValueError(
                f"honor_threshold must be in 0-{MAX_RANK}, got {self.honor_threshold}"
            )


@dataclass(frozen=True)
class GameRecord:
    """Outcome of one simulated game."""

    result: GameResult
    turns: int
    wars: int = 0
    honor_removals: int = 0
    seed: Optional[int] = None


class Game:
    """A single two-player game. Build once, then call play() once."""

    def __init__(
        self,
        params: Params,
        rng: Shuffler,
        player1: PlayerDeck,
        player2: PlayerDeck
    ) -> None:
        """Create (but do not simulate) a game with the given player decks."""
        self.params = params
        self.rng = rng
        self.player1 = player1
        self.player2 = player2

        # Every card at stake in the current round
        self.work: List[Rank] = []

        self.wars = 0
        self.honor_removals = 0

    def _wager(self, deck: PlayerDeck) -> None:
        """Flip up to k cards face-down, always keeping one for the next face-off."""
        n = min(self.params.k, max(deck.cards() - 1, 0))
        for _ in range(n):
            card = deck.draw(self.rng)
            if card is None:
                raise WagerInvariantError(
                    f"War draw found no card with {deck.cards()} left (wager of {n})"
                )
            self.work.append(card)

    def play_round(self) -> RoundResult:
        """Resolve one round, fighting as many wars as the ties demand."""
        honor_threshold = self.params.honor_threshold
        self.work.clear()

        while True:
            # A player unable to flip a card has lost
            card1 = self.player1.draw(self.rng)
            card2 = self.player2.draw(self.rng)
            if card1 is None and card2 is None:
                return GameResult.DRAW
            if card1 is None:
                return GameResult.PLAYER2
            if card2 is None:
                return GameResult.PLAYER1

            # Honorable loss: the losing card is removed from the game
            if card1 != card2 and abs(card1 - card2) <= honor_threshold:
                self.work.append(max(card1, card2))
                self.honor_removals += 1
            else:
                self.work.extend((card1, card2))

            if card1 > card2:
                return RoundWin(Player.PLAYER1)
            if card2 > card1:
                return RoundWin(Player.PLAYER2)

            # War
            self.wars += 1
            self._wager(self.player1)
            self._wager(self.player2)

    def play(self) -> Tuple[GameResult, int]:
        """Play this game to completion, returning the winner and turns taken."""
        turn = 0
        while True:
            turn += 1
            outcome = self.play_round()

            if isinstance(outcome, GameResult):
                logger.debug(
                    f"Game over: {outcome.value} after {turn} turns "
                    f"({self.wars} wars, {self.honor_removals} honor removals)"
                )
                return outcome, turn

            if outcome.player is Player.PLAYER1:
                self.player1.win_loot(self.work)
            else:
                self.player2.win_loot(self.work)


def play_war_game(
    seed: int = 42,
    params: Optional[Params] = None,
    player1: Optional[Sequence[Rank]] = None,
    player2: Optional[Sequence[Rank]] = None,
    copies: int = 4,
) -> GameRecord:
    """Play a complete War game and return its record.

    Without explicit hands, a standard deck with `copies` suits is split
    evenly using the same seeded RNG that drives the game. When only one hand
    is given, the other player starts with no cards.
    """
    params = params or Params()
    rng = random.Random(seed)

    if player1 is None and player2 is None:
        player1, player2 = split_deck(standard_deck(copies=copies), rng)
    player1 = player1 if player1 is not None else []
    player2 = player2 if player2 is not None else []

    game = Game(params, rng, PlayerDeck(player1), PlayerDeck(player2))
    result, turns = game.play()

    return GameRecord(
        result=result,
        turns=turns,
        wars=game.wars,
        honor_removals=game.honor_removals,
        seed=seed,
    )
