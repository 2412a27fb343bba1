from __future__ import annotations

from statemachine import State, StateMachine

from turnplay.blackjack.models import RoundPhase, RoundState


class RoundFSM(StateMachine):
    """FSM wrapper around RoundState.

    - phases: dealing -> player_turn -> dealer_turn -> won | lost
    - the game loop mutates totals; the FSM only guards transitions.
    """

    dealing = State(RoundPhase.dealing.value, value=RoundPhase.dealing.value, initial=True)
    player_turn = State(RoundPhase.player_turn.value, value=RoundPhase.player_turn.value)
    dealer_turn = State(RoundPhase.dealer_turn.value, value=RoundPhase.dealer_turn.value)
    won = State(RoundPhase.won.value, value=RoundPhase.won.value, final=True)
    lost = State(RoundPhase.lost.value, value=RoundPhase.lost.value, final=True)

    dealt = dealing.to(player_turn)
    hit_taken = player_turn.to.itself()
    busted = player_turn.to(lost)
    stood = player_turn.to(dealer_turn)
    dealer_beaten = dealer_turn.to(won)
    house_holds = dealer_turn.to(lost)

    def __init__(self, table: RoundState):
        self.table = table
        super().__init__(start_value=table.phase.value)

    def sync_phase_to_model(self) -> None:
        self.table.phase = RoundPhase(str(self.current_state.value))
