"""Settings for the leaderboard HTTP client."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


logger = logging.getLogger(__name__)

_BASE_URL_ENV = "OSRS_HISCORES_BASE_URL"
_TIMEOUT_ENV = "OSRS_HISCORES_TIMEOUT"

DEFAULT_BASE_URL = "https://secure.runescape.com/m=hiscore_oldschool"
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "osrs-hiscores/0.1"


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default


def _env_timeout() -> float:
    value = _env_float(_TIMEOUT_ENV, DEFAULT_TIMEOUT)
    if value <= 0:
        logger.warning("Non-positive timeout %s for %s; using default %.2f", value, _TIMEOUT_ENV, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return value


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


@dataclass(frozen=True)
class ClientSettings:
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> "ClientSettings":
        """Build settings from ``OSRS_HISCORES_*`` environment variables."""

        return cls(
            base_url=_env_str(_BASE_URL_ENV, DEFAULT_BASE_URL).rstrip("/"),
            timeout=_env_timeout(),
        )
