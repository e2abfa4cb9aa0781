"""Reference tables and client configuration."""

from .client import ClientSettings
from .tables import (
    ACTIVITY_COUNT,
    ACTIVITY_NAMES,
    OVERALL_SKILL_ID,
    OVERALL_SKILL_NAME,
    SKILL_COUNT,
    SKILL_NAMES,
    UNRANKED,
    activity_index,
    activity_name,
    skill_index,
    skill_name,
)

__all__ = [
    "ClientSettings",
    "ACTIVITY_COUNT",
    "ACTIVITY_NAMES",
    "OVERALL_SKILL_ID",
    "OVERALL_SKILL_NAME",
    "SKILL_COUNT",
    "SKILL_NAMES",
    "UNRANKED",
    "activity_index",
    "activity_name",
    "skill_index",
    "skill_name",
]
