from __future__ import annotations

import logging

from turnplay.blackjack.deck import Deck
from turnplay.blackjack.game_loop import play_round
from turnplay.blackjack.models import BlackjackReport, BlackjackStatus
from turnplay.core.decisions import DecisionProvider
from turnplay.core.events import RenderSink, emit
from turnplay.errors import GameError
from turnplay.rng import RandomSource

logger = logging.getLogger(__name__)


def play_blackjack(
    *,
    rng: RandomSource,
    decisions: DecisionProvider,
    sink: RenderSink,
    deck: Deck | None = None,
    max_decision_attempts: int = 3,
) -> BlackjackReport:
    """Run a Blackjack session: one freshly shuffled deck, exactly one round.

    Game errors end the session with status `failed` instead of propagating.
    """

    seed = getattr(rng, "seed", None)
    try:
        table_deck = deck if deck is not None else Deck.new_shuffled(rng=rng)
        table = play_round(
            deck=table_deck,
            decisions=decisions,
            sink=sink,
            max_decision_attempts=max_decision_attempts,
        )
        report = BlackjackReport(
            status=BlackjackStatus.won if table.player_won else BlackjackStatus.lost,
            seed=seed,
            player_total=table.player_total,
            dealer_total=table.dealer_total,
            busted=table.busted,
        )
    except GameError as e:
        logger.exception("Blackjack session failed")
        report = BlackjackReport(status=BlackjackStatus.failed, seed=seed, error=str(e))

    emit(sink, "SESSION_ENDED", game="blackjack", outcome=report.model_dump(mode="json"))
    return report
