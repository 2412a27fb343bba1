from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

from turnplay.blackjack.cards import Card

BLACKJACK = 21
DEALER_STANDS_AT = 17


class RoundPhase(StrEnum):
    dealing = "dealing"
    player_turn = "player_turn"
    dealer_turn = "dealer_turn"
    won = "won"
    lost = "lost"


class RoundState(BaseModel):
    phase: RoundPhase = RoundPhase.dealing

    # The dealer's "showing" value is its running total, starting from one card.
    dealer_total: int = 0
    player_total: int = 0

    dealer_cards: list[Card] = Field(default_factory=list)
    player_cards: list[Card] = Field(default_factory=list)

    busted: bool = False

    @property
    def resolved(self) -> bool:
        return self.phase in {RoundPhase.won, RoundPhase.lost}

    @property
    def player_won(self) -> bool:
        return self.phase == RoundPhase.won


class BlackjackStatus(StrEnum):
    won = "won"
    lost = "lost"
    failed = "failed"


class BlackjackReport(BaseModel):
    status: BlackjackStatus
    seed: int | None = None
    player_total: int = 0
    dealer_total: int = 0
    busted: bool = False
    error: str | None = None
