from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

class Suit(IntEnum):
    club = 0
    diamond = 1
    heart = 2
    spade = 3

class Rank(IntEnum):
    two = 2
    three = 3
    four = 4
    five = 5
    six = 6
    seven = 7
    eight = 8
    nine = 9
    ten = 10
    jack = 11
    queen = 12
    king = 13
    ace = 14

_RANK_LABELS: dict[Rank, str] = {
    **{r: str(r.value) for r in Rank if r <= Rank.nine},
    Rank.ten: "T",
    Rank.jack: "J",
    Rank.queen: "Q",
    Rank.king: "K",
    Rank.ace: "A",
}
_SUIT_LABELS: dict[Suit, str] = {Suit.club: "C", Suit.diamond: "D", Suit.heart: "H", Suit.spade: "S"}

@dataclass(frozen=True, slots=True)
class Card:
    rank: Rank
    suit: Suit

    @property
    def value(self) -> int:
        # Ace is always 11; there is no soft-hand rescoring.
        if self.rank == Rank.ace:
            return 11
        if self.rank >= Rank.jack:
            return 10
        return int(self.rank)

    @property
    def label(self) -> str:
        return f"{_RANK_LABELS[self.rank]}{_SUIT_LABELS[self.suit]}"

    def __str__(self) -> str:
        return self.label
