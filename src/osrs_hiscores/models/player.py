"""Canonical player models produced by the response parsers."""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Skill(BaseModel):
    """One skill row: canonical index, name, rank, level and experience."""

    id: int = Field(..., ge=0)
    name: str
    rank: int
    level: int = Field(..., ge=1)
    experience: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)


class Activity(BaseModel):
    """One activity or boss row; unranked rows always carry a score of 0."""

    id: int = Field(..., ge=0)
    name: str
    rank: int
    score: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)


class Player(BaseModel):
    """Immutable snapshot of a player's leaderboard entry.

    ``skills`` and ``activities`` are stored as tuples, so a list handed to the
    constructor is copied and later mutation of that list has no effect.
    """

    rsn: str
    skills: Tuple[Skill, ...] = ()
    activities: Tuple[Activity, ...] = ()

    model_config = ConfigDict(frozen=True)

    def get_skill(self, name: str) -> Skill:
        wanted = name.strip().lower()
        for skill in self.skills:
            if skill.name.lower() == wanted:
                return skill
        raise KeyError(f"{self.rsn!r} has no skill {name!r}")

    def get_activity(self, name: str) -> Activity:
        wanted = name.strip().lower()
        for activity in self.activities:
            if activity.name.lower() == wanted:
                return activity
        raise KeyError(f"{self.rsn!r} has no activity {name!r}")


class FetchOptions(BaseModel):
    """Per-call fetch configuration."""

    virtual_levels: bool = False

    model_config = ConfigDict(frozen=True)

    @classmethod
    def defaults(cls) -> "FetchOptions":
        return cls()
