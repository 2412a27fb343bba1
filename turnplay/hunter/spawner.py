from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType

from turnplay.hunter.models import Monster, MonsterTemplate
from turnplay.rng import RandomSource

logger = logging.getLogger(__name__)


class ArchetypeName(StrEnum):
    dragon = "dragon"
    orc = "orc"
    slime = "slime"


# Order matters: the random pick indexes into it.
DEFAULT_ARCHETYPES: Mapping[str, MonsterTemplate] = MappingProxyType(
    {
        ArchetypeName.dragon: MonsterTemplate("dragon", "dragon", "D", 20, 4, 100),
        ArchetypeName.orc: MonsterTemplate("orc", "orc", "o", 4, 2, 25),
        ArchetypeName.slime: MonsterTemplate("slime", "slime", "s", 1, 1, 10),
    }
)


class MonsterFactory:
    """Builds a fresh monster per encounter from an injected template table."""

    def __init__(self, *, rng: RandomSource, archetypes: Mapping[str, MonsterTemplate] = DEFAULT_ARCHETYPES) -> None:
        if not archetypes:
            raise ValueError("At least one monster archetype is required")
        self._rng = rng
        self._archetypes = MappingProxyType(dict(archetypes))
        self._order = tuple(self._archetypes.values())

    def spawn(self, archetype: str) -> Monster:
        template = self._archetypes.get(archetype)
        if template is None:
            known = ",".join(self._archetypes)
            raise ValueError(f"Unknown archetype: {archetype} (known: {known})")
        return Monster.from_template(template)

    def spawn_random(self) -> Monster:
        idx = self._rng.uniform(0, len(self._order) - 1)
        template = self._order[idx]
        logger.debug("Spawned %s (roll %d)", template.archetype, idx)
        return Monster.from_template(template)
