from __future__ import annotations

import logging

from turnplay.core.decisions import Action, DecisionProvider
from turnplay.errors import InvalidDecision
from turnplay.turn_processing.validators import ValidationContext, pipeline_for_game

logger = logging.getLogger(__name__)


def coerce_action(raw: object) -> Action:
    if isinstance(raw, Action):
        return raw
    if isinstance(raw, str):
        try:
            return Action(raw.strip().casefold())
        except ValueError:
            pass
    raise InvalidDecision(f"Not a known action: {raw!r}")


def request_decision(
    *,
    provider: DecisionProvider,
    game: str,
    phase: str,
    offered: frozenset[Action],
    prompt: str,
    max_attempts: int = 3,
) -> Action:
    """Ask the provider for a decision and validate it.

    Rejected answers are re-asked up to `max_attempts` times before giving up with
    InvalidDecision.
    """

    if max_attempts < 1:
        raise ValueError("max_attempts must be >= 1")

    ctx = ValidationContext(game=game, phase=phase, offered=offered)
    pipeline = pipeline_for_game(game)

    last_err: InvalidDecision | None = None
    for attempt in range(1, max_attempts + 1):
        raw = provider.next_decision(offered=offered, prompt=prompt)
        try:
            decision = coerce_action(raw)
            pipeline.validate(ctx=ctx, decision=decision)
        except InvalidDecision as e:
            last_err = e
            logger.warning("Rejected decision from %s (attempt %d/%d): %s", provider.name, attempt, max_attempts, e)
            continue

        logger.debug("%s chose %s in %s/%s", provider.name, decision.value, game, phase)
        return decision

    raise InvalidDecision(f"No valid decision after {max_attempts} attempts: {last_err}")
