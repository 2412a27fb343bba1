from __future__ import annotations

import logging
from collections.abc import Sequence

from turnplay.blackjack.cards import Card, Rank, Suit
from turnplay.errors import DeckExhausted
from turnplay.rng import RandomSource

logger = logging.getLogger(__name__)

DECK_SIZE = 52


def canonical_cards() -> list[Card]:
    """All 52 cards: suits club..spade, ranks 2..ace within each suit."""

    return [Card(rank=r, suit=s) for s in Suit for r in Rank]


class Deck:
    """52 unique cards plus a deal cursor that only moves forward."""

    def __init__(self, cards: Sequence[Card] | None = None) -> None:
        ordered = list(cards) if cards is not None else canonical_cards()
        if len(ordered) != DECK_SIZE or set(ordered) != set(canonical_cards()):
            raise ValueError(f"A deck must hold each of the {DECK_SIZE} cards exactly once")
        self._cards = ordered
        self._cursor = 0

    @classmethod
    def new_shuffled(cls, *, rng: RandomSource) -> "Deck":
        deck = cls()
        deck.shuffle(rng=rng)
        return deck

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    @property
    def remaining(self) -> int:
        return DECK_SIZE - self._cursor

    def shuffle(self, *, rng: RandomSource) -> None:
        # Each position swaps with any position, itself included.
        for i in range(DECK_SIZE):
            j = rng.uniform(0, DECK_SIZE - 1)
            self._cards[i], self._cards[j] = self._cards[j], self._cards[i]

    def deal(self) -> Card:
        if self._cursor >= DECK_SIZE:
            raise DeckExhausted(f"All {DECK_SIZE} cards have been dealt")
        card = self._cards[self._cursor]
        self._cursor += 1
        logger.debug("Dealt %s (%d left)", card, self.remaining)
        return card
