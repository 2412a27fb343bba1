from __future__ import annotations

import logging
import random
from typing import Protocol

from turnplay.errors import RandomRangeInvalid

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def uniform(self, min_value: int, max_value: int) -> int:  # pragma: no cover
        ...


def check_range(min_value: int, max_value: int) -> None:
    if min_value > max_value:
        raise RandomRangeInvalid(f"Invalid range: min {min_value} > max {max_value}")


class SeededRandomSource:
    """Process-wide uniform integer source.

    The seed is picked once (unless given) and kept on the instance so a run can be
    replayed with TURNPLAY_SEED.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed if seed is not None else random.SystemRandom().randint(1, 2**31 - 1)
        self._rng = random.Random(self.seed)
        logger.debug("Random source seeded with %s", self.seed)

    def uniform(self, min_value: int, max_value: int) -> int:
        check_range(min_value, max_value)
        return self._rng.randint(min_value, max_value)
