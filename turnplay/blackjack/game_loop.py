from __future__ import annotations

import logging

from turnplay.blackjack.deck import Deck
from turnplay.blackjack.fsm import RoundFSM
from turnplay.blackjack.models import BLACKJACK, DEALER_STANDS_AT, RoundState
from turnplay.core.decisions import BLACKJACK_CHOICES, Action, DecisionProvider
from turnplay.core.events import RenderSink, emit
from turnplay.turn_processing.decisions import request_decision

logger = logging.getLogger(__name__)

HIT_OR_STAND_PROMPT = "(h) to hit, or (s) to stand: "


def _deal_to_dealer(*, table: RoundState, deck: Deck, sink: RenderSink) -> None:
    card = deck.deal()
    table.dealer_cards.append(card)
    table.dealer_total += card.value
    emit(sink, "CARD_DEALT", hand="dealer", card=card.label, value=card.value)


def _deal_to_player(*, table: RoundState, deck: Deck, sink: RenderSink) -> None:
    card = deck.deal()
    table.player_cards.append(card)
    table.player_total += card.value
    emit(sink, "CARD_DEALT", hand="player", card=card.label, value=card.value)


def play_round(
    *,
    deck: Deck,
    decisions: DecisionProvider,
    sink: RenderSink,
    max_decision_attempts: int = 3,
) -> RoundState:
    """Play one round from the initial deal to a win or a loss.

    The dealer gets a single card up front and its value is shown as the dealer total.
    Ties go to the house.
    """

    table = RoundState()
    fsm = RoundFSM(table)

    _deal_to_dealer(table=table, deck=deck, sink=sink)
    emit(sink, "DEALER_SHOWING", value=table.dealer_total)
    _deal_to_player(table=table, deck=deck, sink=sink)
    _deal_to_player(table=table, deck=deck, sink=sink)
    fsm.dealt()
    fsm.sync_phase_to_model()

    while True:
        emit(sink, "PLAYER_TOTAL", value=table.player_total)
        decision = request_decision(
            provider=decisions,
            game="blackjack",
            phase=table.phase.value,
            offered=BLACKJACK_CHOICES,
            prompt=HIT_OR_STAND_PROMPT,
            max_attempts=max_decision_attempts,
        )
        if decision == Action.stand:
            fsm.stood()
            fsm.sync_phase_to_model()
            break

        _deal_to_player(table=table, deck=deck, sink=sink)
        if table.player_total > BLACKJACK:
            logger.debug("Player busts with %d", table.player_total)
            table.busted = True
            fsm.busted()
            fsm.sync_phase_to_model()
            return table
        fsm.hit_taken()

    while table.dealer_total < DEALER_STANDS_AT:
        _deal_to_dealer(table=table, deck=deck, sink=sink)
        emit(sink, "DEALER_TOTAL", value=table.dealer_total)

    if table.dealer_total > BLACKJACK or table.player_total > table.dealer_total:
        fsm.dealer_beaten()
    else:
        fsm.house_holds()
    fsm.sync_phase_to_model()

    logger.debug("Round resolved %s: player=%d dealer=%d", table.phase.value, table.player_total, table.dealer_total)
    return table
