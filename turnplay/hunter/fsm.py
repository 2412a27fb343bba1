from __future__ import annotations

from statemachine import State, StateMachine

from turnplay.hunter.models import EncounterPhase, EncounterState


class EncounterFSM(StateMachine):
    """FSM wrapper around EncounterState.

    One encounter waits on player decisions until the monster dies, the player dies,
    or the player gets away.
    """

    awaiting_decision = State(
        EncounterPhase.awaiting_decision.value,
        value=EncounterPhase.awaiting_decision.value,
        initial=True,
    )
    monster_killed = State(EncounterPhase.monster_killed.value, value=EncounterPhase.monster_killed.value, final=True)
    player_killed = State(EncounterPhase.player_killed.value, value=EncounterPhase.player_killed.value, final=True)
    fled = State(EncounterPhase.fled.value, value=EncounterPhase.fled.value, final=True)

    blows_exchanged = awaiting_decision.to.itself()
    escape_failed = awaiting_decision.to.itself()
    slain = awaiting_decision.to(monster_killed)
    killed = awaiting_decision.to(player_killed)
    escaped = awaiting_decision.to(fled)

    def __init__(self, encounter: EncounterState):
        self.encounter = encounter
        super().__init__(start_value=encounter.phase.value)

    def sync_phase_to_model(self) -> None:
        self.encounter.phase = EncounterPhase(str(self.current_state.value))
