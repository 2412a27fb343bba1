from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from turnplay.blackjack.models import RoundPhase
from turnplay.core.decisions import Action
from turnplay.errors import InvalidDecision
from turnplay.hunter.models import EncounterPhase


@dataclass(frozen=True, slots=True)
class ValidationContext:
    """Inputs available to validators.

    Kept small and printable so it can be logged as-is.
    """

    game: str
    phase: str
    offered: frozenset[Action]


class DecisionValidator(ABC):
    """A small, composable validation unit for a player decision."""

    @abstractmethod
    def validate(self, *, ctx: ValidationContext, decision: Action) -> None:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class PhaseValidator(DecisionValidator):
    """Decisions are only taken in phases where the player is expected to act."""

    allowed_phases: frozenset[str]

    def validate(self, *, ctx: ValidationContext, decision: Action) -> None:
        if ctx.phase not in self.allowed_phases:
            allowed = ",".join(sorted(self.allowed_phases))
            raise InvalidDecision(f"Decision '{decision}' not allowed in phase '{ctx.phase}' (allowed: {allowed})")


@dataclass(frozen=True, slots=True)
class OfferedChoiceValidator(DecisionValidator):
    def validate(self, *, ctx: ValidationContext, decision: Action) -> None:
        if decision not in ctx.offered:
            offered = ",".join(sorted(a.value for a in ctx.offered))
            raise InvalidDecision(f"Decision '{decision}' was not offered (offered: {offered})")


@dataclass(frozen=True, slots=True)
class ValidatorPipeline:
    validators: tuple[DecisionValidator, ...]

    def validate(self, *, ctx: ValidationContext, decision: Action) -> None:
        for v in self.validators:
            v.validate(ctx=ctx, decision=decision)


DEFAULT_DECISION_PIPELINES: dict[str, ValidatorPipeline] = {
    "blackjack": ValidatorPipeline(
        validators=(
            PhaseValidator(allowed_phases=frozenset({RoundPhase.player_turn.value})),
            OfferedChoiceValidator(),
        )
    ),
    "hunter": ValidatorPipeline(
        validators=(
            PhaseValidator(allowed_phases=frozenset({EncounterPhase.awaiting_decision.value})),
            OfferedChoiceValidator(),
        )
    ),
}


def pipeline_for_game(game: str) -> ValidatorPipeline:
    pipe = DEFAULT_DECISION_PIPELINES.get(game)
    if pipe is None:
        raise ValueError(f"Unknown game: {game}")
    return pipe
