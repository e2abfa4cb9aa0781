"""Synchronous HTTP client for the Old School RuneScape hiscores."""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote

import httpx

from osrs_hiscores.config import ClientSettings
from osrs_hiscores.ingest import ResponseFormat, parse_response
from osrs_hiscores.models import FetchOptions, Player


logger = logging.getLogger(__name__)

_ENDPOINTS = {
    ResponseFormat.STRUCTURED: "index_lite.json",
    ResponseFormat.POSITIONAL: "index_lite.ws",
}


class HiscoresClient:
    """Fetch a player's leaderboard entry and decode it.

    Transport failures surface as ``httpx.HTTPError`` (including
    ``httpx.HTTPStatusError`` for non-2xx answers) and are never turned into
    an empty Player. Decoding failures raise ``HiscoresDecodeError``.
    """

    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        *,
        http_client: Optional[httpx.Client] = None,
    ):
        self.settings = settings or ClientSettings.from_env()
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=self.settings.timeout,
            headers={"User-Agent": self.settings.user_agent},
        )

    def __enter__(self) -> "HiscoresClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def player_url(self, rsn: str, fmt: ResponseFormat | str = ResponseFormat.STRUCTURED) -> str:
        endpoint = _ENDPOINTS[ResponseFormat(fmt)]
        return f"{self.settings.base_url.rstrip('/')}/{endpoint}?player={quote(rsn, safe='')}"

    def fetch_text(self, url: str) -> str:
        logger.debug("GET %s", url)
        resp = self._client.get(url)
        resp.raise_for_status()
        return resp.text

    def get_player(
        self,
        rsn: str,
        options: Optional[FetchOptions] = None,
        fmt: ResponseFormat | str = ResponseFormat.STRUCTURED,
    ) -> Player:
        fmt = ResponseFormat(fmt)
        body = self.fetch_text(self.player_url(rsn, fmt))
        return parse_response(body, fmt, rsn, options or FetchOptions.defaults())
