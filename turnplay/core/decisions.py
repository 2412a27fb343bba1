from __future__ import annotations

from enum import StrEnum
from typing import Protocol


class Action(StrEnum):
    hit = "hit"
    stand = "stand"
    fight = "fight"
    run = "run"


BLACKJACK_CHOICES: frozenset[Action] = frozenset({Action.hit, Action.stand})
HUNTER_CHOICES: frozenset[Action] = frozenset({Action.fight, Action.run})


class DecisionProvider(Protocol):
    """Source of player choices (console, scripted tests, ...).

    Must return one of `offered`; anything else is rejected by the turn pipeline.
    """

    name: str

    def next_decision(self, *, offered: frozenset[Action], prompt: str) -> Action:  # pragma: no cover
        ...
