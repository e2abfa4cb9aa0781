"""Decode leaderboard responses into canonical player records."""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import List, Optional, Sequence

from pydantic import BaseModel, Field, ValidationError
from pydantic.config import ConfigDict

from osrs_hiscores.config import (
    ACTIVITY_COUNT,
    OVERALL_SKILL_ID,
    OVERALL_SKILL_NAME,
    SKILL_COUNT,
    UNRANKED,
    activity_name,
    skill_name,
)
from osrs_hiscores.levels import level_for_experience
from osrs_hiscores.models import Activity, FetchOptions, Player, Skill


logger = logging.getLogger(__name__)


class ResponseFormat(str, Enum):
    STRUCTURED = "json"
    POSITIONAL = "csv"


class HiscoresDecodeError(ValueError):
    """Raised when a response body cannot be turned into a Player."""

    def __init__(self, message: str, *, line: int | None = None):
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


class HiscoreEntry(BaseModel):
    id: int = 0
    name: str = ""
    rank: int = UNRANKED
    level: int = 1
    experience: int = Field(default=0, alias="xp")
    score: int = 0

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class HiscoreResponse(BaseModel):
    skills: Optional[List[HiscoreEntry]] = None
    activities: Optional[List[HiscoreEntry]] = None

    model_config = ConfigDict(extra="ignore")


def _skill_level(level: int, experience: int, *, is_overall: bool, options: FetchOptions) -> int:
    # Overall is a sum of levels, not derived from its own experience.
    if options.virtual_levels and not is_overall:
        return level_for_experience(experience, extended=True)
    return level


def _activity_score(rank: int, score: int) -> int:
    return 0 if rank == UNRANKED else score


def parse_structured(raw: str, player_name: str, options: FetchOptions | None = None) -> Player:
    """Parse the JSON form: ``{"skills": [...], "activities": [...]}``."""

    options = options or FetchOptions.defaults()
    if not raw or not raw.strip():
        raise HiscoresDecodeError("empty response body")
    try:
        response = HiscoreResponse.model_validate_json(raw)
    except ValidationError as exc:
        raise HiscoresDecodeError(f"malformed structured response: {exc}") from exc

    try:
        skills = [
            Skill(
                id=entry.id,
                name=entry.name,
                rank=entry.rank,
                level=_skill_level(
                    entry.level,
                    entry.experience,
                    is_overall=entry.name == OVERALL_SKILL_NAME,
                    options=options,
                ),
                experience=entry.experience,
            )
            for entry in response.skills or []
        ]
        activities = [
            Activity(
                id=entry.id,
                name=entry.name,
                rank=entry.rank,
                score=_activity_score(entry.rank, entry.score),
            )
            for entry in response.activities or []
        ]
    except ValueError as exc:
        raise HiscoresDecodeError(f"invalid entry in structured response: {exc}") from exc

    logger.debug(
        "Parsed structured response for %s: %d skills, %d activities",
        player_name,
        len(skills),
        len(activities),
    )
    return Player(rsn=player_name, skills=skills, activities=activities)


_INTEGER_FIELD = re.compile(r"-?[0-9]+")


def _parse_int(field: str) -> int:
    text = field.rstrip("\r")
    if not _INTEGER_FIELD.fullmatch(text):
        raise ValueError(f"not an integer: {field!r}")
    return int(text)


def _split_fields(line: str, expected: int, line_number: int) -> List[int]:
    parts = line.split(",")
    if len(parts) < expected:
        raise HiscoresDecodeError(
            f"expected {expected} comma-separated fields, got {len(parts)}: {line!r}",
            line=line_number,
        )
    values: List[int] = []
    for part in parts[:expected]:
        try:
            values.append(_parse_int(part))
        except ValueError:
            raise HiscoresDecodeError(f"field {part!r} is not an integer", line=line_number) from None
    return values


def _positional_lines(raw: str) -> Sequence[str]:
    lines = raw.splitlines()
    required = SKILL_COUNT + ACTIVITY_COUNT
    if len(lines) < required:
        raise HiscoresDecodeError(f"expected at least {required} lines, got {len(lines)}")
    return lines


def parse_positional(raw: str, player_name: str, options: FetchOptions | None = None) -> Player:
    """Parse the line-per-entry CSV form.

    The first 24 lines are ``rank,level,xp`` skill rows and the next 40 are
    ``rank,score`` activity rows, both in canonical table order. Anything after
    that is ignored.
    """

    options = options or FetchOptions.defaults()
    lines = _positional_lines(raw)

    skills: List[Skill] = []
    for idx in range(SKILL_COUNT):
        rank, level, xp = _split_fields(lines[idx], 3, idx + 1)
        try:
            skills.append(
                Skill(
                    id=idx,
                    name=skill_name(idx),
                    rank=rank,
                    level=_skill_level(level, xp, is_overall=idx == OVERALL_SKILL_ID, options=options),
                    experience=xp,
                )
            )
        except ValueError as exc:
            raise HiscoresDecodeError(f"invalid skill row: {exc}", line=idx + 1) from exc

    activities: List[Activity] = []
    for idx in range(ACTIVITY_COUNT):
        line_number = SKILL_COUNT + idx + 1
        rank, score = _split_fields(lines[SKILL_COUNT + idx], 2, line_number)
        try:
            activities.append(
                Activity(
                    id=idx,
                    name=activity_name(idx),
                    rank=rank,
                    score=_activity_score(rank, score),
                )
            )
        except ValueError as exc:
            raise HiscoresDecodeError(f"invalid activity row: {exc}", line=line_number) from exc

    logger.debug("Parsed positional response for %s", player_name)
    return Player(rsn=player_name, skills=skills, activities=activities)


def parse_response(
    raw: str,
    fmt: ResponseFormat | str,
    player_name: str,
    options: FetchOptions | None = None,
) -> Player:
    """Dispatch to the parser for ``fmt`` ("json" or "csv")."""

    fmt = ResponseFormat(fmt)
    if fmt is ResponseFormat.STRUCTURED:
        return parse_structured(raw, player_name, options)
    return parse_positional(raw, player_name, options)
