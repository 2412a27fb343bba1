from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from turnplay.core.decisions import Action
from turnplay.core.events import RenderEvent

# Single-letter answers accepted at the prompt.
KEY_BINDINGS: dict[str, Action] = {
    "h": Action.hit,
    "s": Action.stand,
    "f": Action.fight,
    "r": Action.run,
}


@dataclass(slots=True)
class ConsoleDecisionProvider:
    """Reads single-letter choices from the terminal until one is offered."""

    name: str = "console"
    input_fn: Callable[[str], str] = input

    def next_decision(self, *, offered: frozenset[Action], prompt: str) -> Action:
        while True:
            raw = self.input_fn(prompt).strip().casefold()
            action = KEY_BINDINGS.get(raw[:1]) if raw else None
            if action is not None and action in offered:
                return action


@dataclass(slots=True)
class ConsoleRenderer:
    """Render sink that prints the classic console messages."""

    out: Callable[[str], None] = print

    def emit(self, event: RenderEvent) -> None:
        p = event.payload
        match event.type:
            case "DEALER_SHOWING":
                self.out(f"The dealer is showing: {p['value']}")
            case "DEALER_TOTAL":
                self.out(f"The dealer now has: {p['value']}")
            case "PLAYER_TOTAL":
                self.out(f"You have: {p['value']}")
            case "CARD_DEALT":
                if p["hand"] == "player":
                    self.out(f"You draw {p['card']}.")
                else:
                    self.out(f"The dealer draws {p['card']}.")
            case "MONSTER_ENCOUNTERED":
                self.out(f"You have encountered a {p['monster']['name']} ({p['monster']['symbol']}).")
            case "DAMAGE_DEALT":
                if p["source"]["kind"] == "player":
                    self.out(f"You hit the {p['target']['name']} for {p['amount']} damage.")
                else:
                    self.out(f"The {p['source']['name']} hit you for {p['amount']} damage.")
            case "FLEE_ATTEMPTED":
                self.out("You successfully fled." if p["success"] else "You failed to flee.")
            case "CREATURE_DIED":
                if p["creature"]["kind"] == "monster":
                    self.out(f"You killed the {p['creature']['name']}.")
            case "GOLD_LOOTED":
                self.out(f"You found {p['amount']} gold.")
            case "LEVEL_UP":
                self.out(f"You are now level {p['new_level']}.")
            case "SESSION_ENDED":
                self._session_ended(game=p["game"], outcome=p["outcome"])

    def _session_ended(self, *, game: str, outcome: dict) -> None:
        status = outcome["status"]
        if status == "failed":
            self.out(f"The game was aborted: {outcome.get('error')}")
        elif game == "blackjack":
            self.out("You win!" if status == "won" else "You lose!")
        elif status == "won":
            self.out(f"You have won with {outcome['gold']} gold.")
        else:
            self.out(f"You died at level {outcome['level']} and with {outcome['gold']} gold.")
            self.out("Too bad you can't take it with you!")
