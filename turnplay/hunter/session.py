from __future__ import annotations

import logging

from turnplay.core.decisions import DecisionProvider
from turnplay.core.events import RenderSink, emit
from turnplay.errors import GameError
from turnplay.hunter.game_loop import run_encounter
from turnplay.hunter.models import EncounterPhase, HuntReport, HuntStatus, Player
from turnplay.hunter.spawner import MonsterFactory
from turnplay.rng import RandomSource

logger = logging.getLogger(__name__)


def run_hunt(
    *,
    player_name: str,
    rng: RandomSource,
    decisions: DecisionProvider,
    sink: RenderSink,
    factory: MonsterFactory | None = None,
    player: Player | None = None,
    max_decision_attempts: int = 3,
) -> HuntReport:
    """Spawn monsters one at a time until the player dies or reaches the winning level.

    The player is owned here for the whole session; each encounter gets a new monster.
    Game errors end the session with status `failed`.
    """

    hero = player if player is not None else Player.new(name=player_name)
    spawner = factory if factory is not None else MonsterFactory(rng=rng)
    seed = getattr(rng, "seed", None)

    encounters = 0
    kills = 0
    try:
        while not hero.is_dead and not hero.has_won:
            monster = spawner.spawn_random()
            encounters += 1
            result = run_encounter(
                player=hero,
                monster=monster,
                rng=rng,
                decisions=decisions,
                sink=sink,
                max_decision_attempts=max_decision_attempts,
            )
            hero = result.player
            if result.phase == EncounterPhase.monster_killed:
                kills += 1
    except GameError as e:
        logger.exception("Hunt for %s failed", hero.creature.name)
        status = HuntStatus.failed
        error: str | None = str(e)
    else:
        status = HuntStatus.won if hero.has_won else HuntStatus.died
        error = None

    report = HuntReport(
        status=status,
        player_name=hero.creature.name,
        seed=seed,
        level=hero.level,
        gold=hero.creature.gold,
        encounters=encounters,
        monsters_killed=kills,
        error=error,
    )
    logger.info("Hunt ended: %s", report.model_dump_json())
    emit(sink, "SESSION_ENDED", game="hunter", outcome=report.model_dump(mode="json"))
    return report
