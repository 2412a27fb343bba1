from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field

WINNING_LEVEL = 20


class CreatureState(BaseModel):
    """Stats shared by every creature. Dead means health <= 0; health may go negative."""

    name: str
    symbol: str = Field(..., min_length=1, max_length=1)
    health: int
    attack_damage: int
    gold: int = 0

    @property
    def is_dead(self) -> bool:
        return self.health <= 0

    def reduce_health(self, damage: int) -> None:
        self.health -= damage

    def add_gold(self, gold: int) -> None:
        self.gold += gold


class Player(BaseModel):
    kind: Literal["player"] = "player"
    creature: CreatureState
    level: int = 1

    @classmethod
    def new(cls, *, name: str) -> "Player":
        return cls(creature=CreatureState(name=name, symbol="@", health=10, attack_damage=1, gold=0))

    @property
    def is_dead(self) -> bool:
        return self.creature.is_dead

    @property
    def has_won(self) -> bool:
        # Exactly 20: the level only ever moves up by one.
        return self.level == WINNING_LEVEL

    def level_up(self) -> None:
        self.level += 1
        self.creature.attack_damage += 1


@dataclass(frozen=True, slots=True)
class MonsterTemplate:
    archetype: str
    name: str
    symbol: str
    health: int
    attack_damage: int
    gold: int


class Monster(BaseModel):
    kind: Literal["monster"] = "monster"
    archetype: str
    creature: CreatureState

    @classmethod
    def from_template(cls, template: MonsterTemplate) -> "Monster":
        return cls(
            archetype=template.archetype,
            creature=CreatureState(
                name=template.name,
                symbol=template.symbol,
                health=template.health,
                attack_damage=template.attack_damage,
                gold=template.gold,
            ),
        )

    @property
    def is_dead(self) -> bool:
        return self.creature.is_dead


Combatant = Annotated[Union[Player, Monster], Field(discriminator="kind")]


def describe(combatant: Player | Monster) -> dict[str, Any]:
    """Render-friendly descriptor for a creature."""

    match combatant:
        case Player(creature=c, level=level):
            return {"kind": "player", "name": c.name, "symbol": c.symbol, "level": level}
        case Monster(creature=c, archetype=archetype):
            return {"kind": "monster", "name": c.name, "symbol": c.symbol, "archetype": archetype}
    raise TypeError(f"Not a creature: {combatant!r}")


class EncounterPhase(StrEnum):
    awaiting_decision = "awaiting_decision"
    monster_killed = "monster_killed"
    player_killed = "player_killed"
    fled = "fled"


class EncounterState(BaseModel):
    player: Player
    monster: Monster
    phase: EncounterPhase = EncounterPhase.awaiting_decision
    decisions_taken: int = 0

    @property
    def resolved(self) -> bool:
        return self.phase != EncounterPhase.awaiting_decision


class HuntStatus(StrEnum):
    won = "won"
    died = "died"
    failed = "failed"


class HuntReport(BaseModel):
    status: HuntStatus
    player_name: str
    seed: int | None = None
    level: int
    gold: int
    encounters: int = 0
    monsters_killed: int = 0
    error: str | None = None
