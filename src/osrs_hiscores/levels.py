"""Experience to level conversion, including virtual levels above 99."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple


MIN_LEVEL = 1
MAX_REGULAR_LEVEL = 99
MAX_VIRTUAL_LEVEL = 126

_XP_MULTIPLIER = 300
_XP_POWER_BASE = 2.0
_XP_POWER_DIVISOR = 7.0
_XP_POINTS_DIVISOR = 4


@dataclass(frozen=True)
class LevelTable:
    """Minimum cumulative experience per level.

    ``thresholds[0]`` is level 1, so ``thresholds[level - 1]`` is the
    experience needed to reach ``level``.
    """

    thresholds: Tuple[int, ...]

    @property
    def max_level(self) -> int:
        return len(self.thresholds)

    def experience_for_level(self, level: int) -> int:
        if not MIN_LEVEL <= level <= self.max_level:
            raise ValueError(f"level must be between {MIN_LEVEL} and {self.max_level}, got {level}")
        return self.thresholds[level - 1]

    def level_for_experience(self, xp: int, *, extended: bool = False) -> int:
        ceiling = min(MAX_VIRTUAL_LEVEL if extended else MAX_REGULAR_LEVEL, self.max_level)
        # Highest satisfied threshold wins, so scan downwards.
        for level in range(ceiling, MIN_LEVEL - 1, -1):
            if xp >= self.thresholds[level - 1]:
                return level
        return MIN_LEVEL

    def experience_to_next_level(self, xp: int, *, extended: bool = False) -> int:
        level = self.level_for_experience(xp, extended=extended)
        ceiling = MAX_VIRTUAL_LEVEL if extended else MAX_REGULAR_LEVEL
        if level >= min(ceiling, self.max_level):
            return 0
        return self.thresholds[level] - xp


def build_level_table(max_level: int = MAX_VIRTUAL_LEVEL) -> LevelTable:
    """Compute the experience table for levels ``1..max_level``."""

    if max_level < MIN_LEVEL:
        raise ValueError(f"max_level must be at least {MIN_LEVEL}, got {max_level}")
    thresholds = []
    points = 0
    for level in range(MIN_LEVEL, max_level + 1):
        thresholds.append(points // _XP_POINTS_DIVISOR)
        points += math.floor(level + _XP_MULTIPLIER * _XP_POWER_BASE ** (level / _XP_POWER_DIVISOR))
    return LevelTable(thresholds=tuple(thresholds))


@lru_cache(maxsize=None)
def get_level_table() -> LevelTable:
    """Return the shared table, building it on first use."""

    return build_level_table()


def level_for_experience(xp: int, extended: bool = False) -> int:
    return get_level_table().level_for_experience(xp, extended=extended)


def compute_level(experience: int, extended_ceiling: bool = False) -> int:
    """Level reached with ``experience``; capped at 126 when extended, else 99."""

    return level_for_experience(experience, extended=extended_ceiling)


def experience_to_next_level(xp: int, extended: bool = False) -> int:
    return get_level_table().experience_to_next_level(xp, extended=extended)
