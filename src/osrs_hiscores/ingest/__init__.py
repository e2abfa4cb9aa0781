"""Decoders for the two leaderboard response formats."""

from .hiscores import (
    HiscoreEntry,
    HiscoreResponse,
    HiscoresDecodeError,
    ResponseFormat,
    parse_positional,
    parse_response,
    parse_structured,
)

__all__ = [
    "HiscoreEntry",
    "HiscoreResponse",
    "HiscoresDecodeError",
    "ResponseFormat",
    "parse_positional",
    "parse_response",
    "parse_structured",
]
