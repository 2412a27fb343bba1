from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

import pytest

from turnplay.blackjack.cards import Card
from turnplay.blackjack.deck import Deck, canonical_cards
from turnplay.core.decisions import Action
from turnplay.core.events import EventLog
from turnplay.rng import check_range

class ScriptedRandom:
    """Deterministic RandomSource: returns queued values, checking each against the range."""

    seed = None

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self.calls: list[tuple[int, int]] = []

    def uniform(self, min_value: int, max_value: int) -> int:
        check_range(min_value, max_value)
        self.calls.append((min_value, max_value))
        if not self._values:
            raise AssertionError(f"ScriptedRandom ran out of values at uniform({min_value}, {max_value})")
        value = self._values.pop(0)
        assert min_value <= value <= max_value, f"{value} outside [{min_value}, {max_value}]"
        return value

class ScriptedDecisions:
    name = "scripted"

    def __init__(self, answers: Iterable[Action | str]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []

    def next_decision(self, *, offered: frozenset[Action], prompt: str) -> Action:
        self.prompts.append(prompt)
        if not self._answers:
            raise AssertionError("ScriptedDecisions ran out of answers")
        return self._answers.pop(0)  # type: ignore[return-value]

@pytest.fixture()
def scripted_rng() -> Callable[..., ScriptedRandom]:
    def _make(*values: int) -> ScriptedRandom:
        return ScriptedRandom(values)

    return _make

@pytest.fixture()
def scripted_decisions() -> Callable[..., ScriptedDecisions]:
    def _make(*answers: Action | str) -> ScriptedDecisions:
        return ScriptedDecisions(answers)

    return _make

@pytest.fixture()
def event_log() -> EventLog:
    return EventLog()

def stack_deck(top: Sequence[Card]) -> Deck:
    """Deck whose first cards are `top`, followed by the rest in canonical order."""

    rest = [c for c in canonical_cards() if c not in top]
    return Deck([*top, *rest])

@pytest.fixture()
def stacked_deck() -> Callable[[Sequence[Card]], Deck]:
    return stack_deck
