"""Old School RuneScape hiscores client and response parsers."""

from osrs_hiscores.client import HiscoresClient
from osrs_hiscores.ingest import HiscoresDecodeError, ResponseFormat, parse_response
from osrs_hiscores.levels import compute_level, get_level_table, level_for_experience
from osrs_hiscores.models import Activity, FetchOptions, Player, Skill

__all__ = [
    "Activity",
    "FetchOptions",
    "HiscoresClient",
    "HiscoresDecodeError",
    "Player",
    "ResponseFormat",
    "Skill",
    "compute_level",
    "get_level_table",
    "level_for_experience",
    "parse_response",
]
