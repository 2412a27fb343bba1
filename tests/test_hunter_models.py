from __future__ import annotations

import pytest
from pydantic import ValidationError

from turnplay.hunter.models import CreatureState, Monster, Player, describe
from turnplay.hunter.spawner import DEFAULT_ARCHETYPES, ArchetypeName, MonsterFactory


def test_new_player_starting_stats() -> None:
    p = Player.new(name="Ada")

    assert p.creature.name == "Ada"
    assert p.creature.symbol == "@"
    assert p.creature.health == 10
    assert p.creature.attack_damage == 1
    assert p.creature.gold == 0
    assert p.level == 1
    assert not p.is_dead
    assert not p.has_won


def test_level_up_raises_level_and_damage_together() -> None:
    p = Player.new(name="Ada")
    p.level_up()
    p.level_up()

    assert p.level == 3
    assert p.creature.attack_damage == 3


@pytest.mark.parametrize(("level", "won"), [(1, False), (19, False), (20, True), (21, False)])
def test_win_only_at_exactly_level_twenty(level: int, won: bool) -> None:
    p = Player.new(name="Ada")
    p.level = level
    assert p.has_won is won


@pytest.mark.parametrize(("health", "dead"), [(1, False), (0, True), (-3, True)])
def test_dead_at_zero_or_below(health: int, dead: bool) -> None:
    c = CreatureState(name="x", symbol="x", health=health, attack_damage=1)
    assert c.is_dead is dead


def test_symbol_must_be_single_character() -> None:
    with pytest.raises(ValidationError):
        CreatureState(name="x", symbol="xy", health=1, attack_damage=1)


def test_default_archetype_table() -> None:
    assert list(DEFAULT_ARCHETYPES) == [ArchetypeName.dragon, ArchetypeName.orc, ArchetypeName.slime]

    dragon = DEFAULT_ARCHETYPES[ArchetypeName.dragon]
    assert (dragon.name, dragon.symbol, dragon.health, dragon.attack_damage, dragon.gold) == ("dragon", "D", 20, 4, 100)
    orc = DEFAULT_ARCHETYPES["orc"]
    assert (orc.name, orc.symbol, orc.health, orc.attack_damage, orc.gold) == ("orc", "o", 4, 2, 25)
    slime = DEFAULT_ARCHETYPES["slime"]
    assert (slime.name, slime.symbol, slime.health, slime.attack_damage, slime.gold) == ("slime", "s", 1, 1, 10)


def test_monsters_are_independent_copies(scripted_rng) -> None:
    factory = MonsterFactory(rng=scripted_rng())
    a = factory.spawn("orc")
    b = factory.spawn("orc")

    a.creature.reduce_health(3)

    assert a.creature.health == 1
    assert b.creature.health == 4
    assert DEFAULT_ARCHETYPES["orc"].health == 4


def test_describe_matches_on_kind() -> None:
    p = Player.new(name="Ada")
    m = Monster.from_template(DEFAULT_ARCHETYPES["slime"])

    assert describe(p) == {"kind": "player", "name": "Ada", "symbol": "@", "level": 1}
    assert describe(m) == {"kind": "monster", "name": "slime", "symbol": "s", "archetype": "slime"}


def test_describe_rejects_non_creatures() -> None:
    with pytest.raises(TypeError):
        describe("slime")  # type: ignore[arg-type]
