"""Canonical skill and activity tables for the leaderboard responses."""

from __future__ import annotations

from typing import Iterable, Tuple


SKILL_NAMES: Tuple[str, ...] = (
    "Overall", "Attack", "Defence", "Strength", "Hitpoints", "Ranged",
    "Prayer", "Magic", "Cooking", "Woodcutting", "Fletching", "Fishing",
    "Firemaking", "Crafting", "Smithing", "Mining", "Herblore", "Agility",
    "Thieving", "Slayer", "Farming", "Runecrafting", "Hunter", "Construction",
)

ACTIVITY_NAMES: Tuple[str, ...] = (
    "League Points", "Bounty Hunter - Hunter", "Bounty Hunter - Rogue",
    "Clue Scrolls (all)", "Clue Scrolls (beginner)", "Clue Scrolls (easy)",
    "Clue Scrolls (medium)", "Clue Scrolls (hard)", "Clue Scrolls (elite)",
    "Clue Scrolls (master)", "LMS - Rank", "PvP Arena - Rank",
    "Soul Wars Zeal", "Rifts closed", "Abyssal Sire", "Alchemical Hydra",
    "Artio", "Barrows Chests", "Bryophyta", "Callisto", "Calvarion",
    "Cerberus", "Chambers of Xeric", "Chambers of Xeric: Challenge Mode",
    "Chaos Elemental", "Chaos Fanatic", "Commander Zilyana",
    "Corporeal Beast", "Crazy Archaeologist", "Dagannoth Prime",
    "Dagannoth Rex", "Dagannoth Supreme", "Deranged Archaeologist",
    "Duke Sucellus", "General Graardor", "Giant Mole", "Grotesque Guardians",
    "Hespori", "Kalphite Queen", "King Black Dragon",
)

SKILL_COUNT = len(SKILL_NAMES)
ACTIVITY_COUNT = len(ACTIVITY_NAMES)

OVERALL_SKILL_ID = 0
OVERALL_SKILL_NAME = SKILL_NAMES[OVERALL_SKILL_ID]

# Rank reported for players without a placement.
UNRANKED = -1


def _name_token(value: str) -> str:
    return " ".join(value.split()).lower()


def _build_index(names: Iterable[str]) -> dict[str, int]:
    return {_name_token(name): idx for idx, name in enumerate(names)}


_SKILL_INDEX = _build_index(SKILL_NAMES)
_ACTIVITY_INDEX = _build_index(ACTIVITY_NAMES)


def skill_name(index: int) -> str:
    """Return the skill name at ``index``, raising IndexError if out of range."""

    if not 0 <= index < SKILL_COUNT:
        raise IndexError(f"skill index {index} outside 0..{SKILL_COUNT - 1}")
    return SKILL_NAMES[index]


def activity_name(index: int) -> str:
    """Return the activity name at ``index``, raising IndexError if out of range."""

    if not 0 <= index < ACTIVITY_COUNT:
        raise IndexError(f"activity index {index} outside 0..{ACTIVITY_COUNT - 1}")
    return ACTIVITY_NAMES[index]


def skill_index(name: str) -> int:
    """Resolve a skill name (case-insensitive) to its canonical index."""

    key = _name_token(name)
    if key not in _SKILL_INDEX:
        raise KeyError(f"Unknown skill {name!r}")
    return _SKILL_INDEX[key]


def activity_index(name: str) -> int:
    """Resolve an activity name (case-insensitive) to its canonical index."""

    key = _name_token(name)
    if key not in _ACTIVITY_INDEX:
        raise KeyError(f"Unknown activity {name!r}")
    return _ACTIVITY_INDEX[key]
