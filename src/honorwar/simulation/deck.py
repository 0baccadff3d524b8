"""Player card storage and deck composition."""

from __future__ import annotations

from numbers import Integral
from typing import List, Optional, Protocol, Sequence, Tuple

# Ranks are plain ints compared by value; no suits in War
Rank = int

MIN_RANK = 0
MAX_RANK = 255


class Shuffler(Protocol):
    """Anything that can shuffle a list uniformly in place.

    ``random.Random`` and ``numpy.random.Generator`` both qualify.
    """

    def shuffle(self, x: List[Rank]) -> None:
        ...


def _check_ranks(cards: Sequence[Rank]) -> None:
    for card in cards:
        if not isinstance(card, Integral):
            raise ValueError(f"Rank must be an integer, got {card!r}")
        if not MIN_RANK <= card <= MAX_RANK:
            raise ValueError(f"Rank {card} outside {MIN_RANK}-{MAX_RANK}")


class PlayerDeck:
    """The cards owned by one player.

    Cards are drawn from ``deck`` until it is empty, at which point the whole
    ``discard`` pile is shuffled to become the new deck. A new PlayerDeck
    starts with every card in the discard, so the first draw shuffles.
    """

    def __init__(self, cards: Sequence[Rank]) -> None:
        _check_ranks(cards)
        self.deck: List[Rank] = []
        self.discard: List[Rank] = list(cards)

    def cards(self) -> int:
        """Total cards still owned (draw pile plus discard)."""
        return len(self.deck) + len(self.discard)

    def draw(self, rng: Shuffler) -> Optional[Rank]:
        """Take the top card, reshuffling the discard in if needed.

        Returns None when the player has no cards left.
        """
        if not self.deck:
            rng.shuffle(self.discard)
            self.deck, self.discard = self.discard, self.deck

        if not self.deck:
            return None
        return self.deck.pop()

    def win_loot(self, cards: Sequence[Rank]) -> None:
        """Add won cards to the discard, in order."""
        self.discard.extend(cards)

    def __repr__(self) -> str:
        return f"PlayerDeck(deck={self.deck!r}, discard={self.discard!r})"


def standard_deck(low: int = 2, high: int = 14, copies: int = 4) -> List[Rank]:
    """Build a suitless deck with ranks low..high, each repeated `copies` times.

    The defaults give the usual 52 cards with aces high (14).
    """
    if copies < 1:
        raise ValueError(f"copies must be at least 1, got {copies}")
    if low > high:
        raise ValueError(f"Empty rank range {low}..{high}")
    ranks = list(range(low, high + 1))
    _check_ranks(ranks)
    return ranks * copies


def split_deck(cards: Sequence[Rank], rng: Shuffler) -> Tuple[List[Rank], List[Rank]]:
    """Shuffle a copy of `cards` and cut it into two hands.

    Player 1 gets the first half, plus the extra card on an odd count.
    """
    shuffled = list(cards)
    rng.shuffle(shuffled)
    half = (len(shuffled) + 1) // 2
    return shuffled[:half], shuffled[half:]
