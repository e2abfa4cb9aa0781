"""CSV and JSON rendering helpers for player records."""

from __future__ import annotations

import csv
import json
from io import StringIO
from typing import List

from osrs_hiscores.models import Player


CSV_HEADERS = ("section", "id", "name", "rank", "level", "experience", "score")


def skills_to_rows(player: Player) -> List[list]:
    return [
        ["skill", skill.id, skill.name, skill.rank, skill.level, skill.experience, ""]
        for skill in player.skills
    ]


def activities_to_rows(player: Player) -> List[list]:
    return [
        ["activity", activity.id, activity.name, activity.rank, "", "", activity.score]
        for activity in player.activities
    ]


def export_player_to_csv(player: Player) -> str:
    """Render skills then activities as one CSV document with a header row."""

    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(CSV_HEADERS)
    writer.writerows(skills_to_rows(player))
    writer.writerows(activities_to_rows(player))
    return buffer.getvalue()


def player_to_json(player: Player, *, indent: int | None = 2) -> str:
    return json.dumps(player.model_dump(mode="json"), indent=indent)


__all__ = [
    "CSV_HEADERS",
    "activities_to_rows",
    "export_player_to_csv",
    "player_to_json",
    "skills_to_rows",
]
