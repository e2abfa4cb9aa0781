"""Data models shared by the parsers, client and CLI."""

from .player import Activity, FetchOptions, Player, Skill

__all__ = ["Activity", "FetchOptions", "Player", "Skill"]
