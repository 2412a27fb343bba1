from __future__ import annotations

import logging

from turnplay.core.decisions import HUNTER_CHOICES, Action, DecisionProvider
from turnplay.core.events import RenderSink, emit
from turnplay.hunter.fsm import EncounterFSM
from turnplay.hunter.models import Combatant, EncounterState, Monster, Player, describe
from turnplay.rng import RandomSource
from turnplay.turn_processing.decisions import request_decision

logger = logging.getLogger(__name__)

RUN_OR_FIGHT_PROMPT = "(R)un or (F)ight: "
FLEE_CHANCE_PERCENT = 50


def strike(*, attacker: Combatant, target: Combatant, sink: RenderSink) -> None:
    damage = attacker.creature.attack_damage
    target.creature.reduce_health(damage)
    emit(sink, "DAMAGE_DEALT", source=describe(attacker), target=describe(target), amount=damage)


def try_flee(*, rng: RandomSource) -> bool:
    return rng.uniform(1, 100) <= FLEE_CHANCE_PERCENT


def _loot_and_level_up(*, player: Player, monster: Monster, sink: RenderSink) -> None:
    player.creature.add_gold(monster.creature.gold)
    emit(sink, "GOLD_LOOTED", amount=monster.creature.gold, total=player.creature.gold)
    player.level_up()
    emit(sink, "LEVEL_UP", new_level=player.level, attack_damage=player.creature.attack_damage)


def run_encounter(
    *,
    player: Player,
    monster: Monster,
    rng: RandomSource,
    decisions: DecisionProvider,
    sink: RenderSink,
    max_decision_attempts: int = 3,
) -> EncounterState:
    """Fight or flee one monster until someone dies or the player escapes."""

    encounter = EncounterState(player=player, monster=monster)
    fsm = EncounterFSM(encounter)
    player, monster = encounter.player, encounter.monster

    emit(sink, "MONSTER_ENCOUNTERED", monster=describe(monster))

    while not encounter.resolved:
        decision = request_decision(
            provider=decisions,
            game="hunter",
            phase=encounter.phase.value,
            offered=HUNTER_CHOICES,
            prompt=RUN_OR_FIGHT_PROMPT,
            max_attempts=max_decision_attempts,
        )
        encounter.decisions_taken += 1

        if decision == Action.run:
            escaped = try_flee(rng=rng)
            emit(sink, "FLEE_ATTEMPTED", success=escaped)
            if escaped:
                fsm.escaped()
            else:
                strike(attacker=monster, target=player, sink=sink)
                if player.is_dead:
                    emit(sink, "CREATURE_DIED", creature=describe(player))
                    fsm.killed()
                else:
                    fsm.escape_failed()
            fsm.sync_phase_to_model()
            continue

        strike(attacker=player, target=monster, sink=sink)
        if monster.is_dead:
            emit(sink, "CREATURE_DIED", creature=describe(monster))
            _loot_and_level_up(player=player, monster=monster, sink=sink)
            fsm.slain()
        else:
            strike(attacker=monster, target=player, sink=sink)
            if player.is_dead:
                emit(sink, "CREATURE_DIED", creature=describe(player))
                fsm.killed()
            else:
                fsm.blows_exchanged()
        fsm.sync_phase_to_model()

    logger.debug(
        "Encounter with %s resolved %s after %d decisions",
        monster.archetype,
        encounter.phase.value,
        encounter.decisions_taken,
    )
    return encounter
