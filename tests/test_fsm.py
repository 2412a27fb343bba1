from __future__ import annotations

import pytest
from statemachine.exceptions import TransitionNotAllowed

from turnplay.blackjack.fsm import RoundFSM
from turnplay.blackjack.models import RoundPhase, RoundState
from turnplay.hunter.fsm import EncounterFSM
from turnplay.hunter.models import EncounterPhase, EncounterState, Monster, Player
from turnplay.hunter.spawner import DEFAULT_ARCHETYPES


def _encounter() -> EncounterState:
    return EncounterState(player=Player.new(name="Ada"), monster=Monster.from_template(DEFAULT_ARCHETYPES["orc"]))


def test_round_fsm_happy_path_syncs_phase() -> None:
    table = RoundState()
    fsm = RoundFSM(table)

    fsm.dealt()
    fsm.hit_taken()
    fsm.stood()
    fsm.dealer_beaten()
    fsm.sync_phase_to_model()

    assert table.phase == RoundPhase.won
    assert table.resolved
    assert table.player_won


def test_round_fsm_rejects_standing_before_the_deal() -> None:
    fsm = RoundFSM(RoundState())
    with pytest.raises(TransitionNotAllowed):
        fsm.stood()


def test_round_fsm_resumes_from_model_phase() -> None:
    fsm = RoundFSM(RoundState(phase=RoundPhase.dealer_turn))
    assert fsm.current_state == fsm.dealer_turn

    with pytest.raises(TransitionNotAllowed):
        fsm.busted()

    fsm.house_holds()
    assert fsm.current_state == fsm.lost


def test_encounter_fsm_stays_open_until_resolved() -> None:
    encounter = _encounter()
    fsm = EncounterFSM(encounter)

    fsm.blows_exchanged()
    fsm.escape_failed()
    fsm.sync_phase_to_model()
    assert encounter.phase == EncounterPhase.awaiting_decision
    assert not encounter.resolved

    fsm.slain()
    fsm.sync_phase_to_model()
    assert encounter.phase == EncounterPhase.monster_killed
    assert encounter.resolved


def test_encounter_fsm_final_states_accept_nothing() -> None:
    encounter = _encounter()
    fsm = EncounterFSM(encounter)
    fsm.escaped()

    with pytest.raises(TransitionNotAllowed):
        fsm.slain()
