"""Command-line interface for looking up a player's hiscores."""

from __future__ import annotations

import argparse
import logging
import sys

import httpx

from osrs_hiscores.client import HiscoresClient
from osrs_hiscores.config import (
    OVERALL_SKILL_ID,
    activity_index,
    activity_name,
    skill_index,
    skill_name,
)
from osrs_hiscores.export import export_player_to_csv, player_to_json
from osrs_hiscores.ingest import HiscoresDecodeError, ResponseFormat
from osrs_hiscores.levels import experience_to_next_level
from osrs_hiscores.models import FetchOptions, Player


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch Old School RuneScape hiscores for a player")
    parser.add_argument(
        "rsn",
        nargs="+",
        help="Player name; multiple words are joined with spaces (e.g. eow btw)",
    )
    parser.add_argument(
        "--virtual",
        action="store_true",
        help="Compute virtual levels above 99 from experience",
    )
    parser.add_argument(
        "--format",
        choices=[fmt.value for fmt in ResponseFormat],
        default=ResponseFormat.STRUCTURED.value,
        help="Response format to request from the hiscores service",
    )
    parser.add_argument(
        "--output",
        choices=["text", "csv", "json"],
        default="text",
        help="How to print the player record",
    )
    parser.add_argument(
        "--skill",
        action="append",
        default=[],
        help="Only show this skill, with experience to the next level (repeatable)",
    )
    parser.add_argument(
        "--activity",
        action="append",
        default=[],
        help="Only show this activity (repeatable)",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _resolve_names(names: list[str], index_of, name_of) -> list[str]:
    return [name_of(index_of(name)) for name in names]


def render_text(
    player: Player,
    virtual_levels: bool,
    *,
    skills: list[str] | None = None,
    activities: list[str] | None = None,
) -> str:
    """Render the original console layout, optionally limited to some entries.

    When ``skills`` is given each listed skill also shows the experience left
    until its next level.
    """

    lines = [
        f"Player: {player.rsn}",
        f"Level Type: {'Virtual' if virtual_levels else 'Regular'}",
    ]
    show_all = not skills and not activities
    if show_all or skills:
        lines.extend(["", "Skills:"])
        for skill in player.skills:
            if skills and skill.name not in skills:
                continue
            line = f"{skill.name}: Level {skill.level} (Rank {skill.rank}, XP {skill.experience})"
            if skills and skill.id != OVERALL_SKILL_ID:
                remaining = experience_to_next_level(skill.experience, extended=virtual_levels)
                line += f" - {remaining} XP to next level"
            lines.append(line)
    if show_all or activities:
        lines.extend(["", "Activities:"])
        for activity in player.activities:
            if activities and activity.name not in activities:
                continue
            lines.append(f"{activity.name}: Score {activity.score} (Rank {activity.rank})")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        skills = _resolve_names(args.skill, skill_index, skill_name)
        activities = _resolve_names(args.activity, activity_index, activity_name)
    except KeyError as exc:
        print(f"Error: {exc.args[0]}", file=sys.stderr)
        return 2

    rsn = " ".join(args.rsn)
    options = FetchOptions(virtual_levels=args.virtual)

    try:
        with HiscoresClient() as client:
            player = client.get_player(rsn, options, fmt=args.format)
    except (httpx.HTTPError, HiscoresDecodeError) as exc:
        print(f"Error fetching player data: {exc}", file=sys.stderr)
        return 1

    if args.output == "csv":
        sys.stdout.write(export_player_to_csv(player))
    elif args.output == "json":
        print(player_to_json(player))
    else:
        print(render_text(player, args.virtual, skills=skills, activities=activities))
    return 0


if __name__ == "__main__":
    sys.exit(main())
