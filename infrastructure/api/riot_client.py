"""Riot Games API client."""
import logging
from typing import Any, Dict, List, Optional, Union

import httpx

from config import settings
from domain.enums import QueueType, Region
from domain.routing import resolve_platform
from . import endpoints
from .errors import DecodeError, HttpStatusError, TransportError

logger = logging.getLogger(__name__)

RegionLike = Union[Region, str]

AUTH_HEADER = "X-Riot-Token"


class RiotAPIClient:
    """Asynchronous Riot API client.

    One GET per operation, no retries and no rate limiting: every failure
    is raised to the caller as a ``RiotAPIError`` subclass.

    Use as an async context manager::

        async with RiotAPIClient(settings.RIOT_API_KEY) as api:
            summoner = await api.get_summoner_by_name("euw", "Faker")
    """

    def __init__(
        self,
        api_key: str,
        *,
        ddragon_version: Optional[str] = None,
        ddragon_locale: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.ddragon_version = ddragon_version or settings.DDRAGON_VERSION
        self.ddragon_locale = ddragon_locale or settings.DDRAGON_LOCALE
        self.session: Optional[httpx.AsyncClient] = None
        self._transport = transport

    async def __aenter__(self):
        self.session = httpx.AsyncClient(transport=self._transport)
        return self

    async def __aexit__(self, *_):
        if self.session:
            await self.session.aclose()
            self.session = None

    def get_headers(self) -> Dict[str, str]:
        return {AUTH_HEADER: self.api_key}

    @staticmethod
    def platform_for(region: RegionLike) -> str:
        """Platform id for a region code or ``Region`` member."""
        code = region.value if isinstance(region, Region) else region
        return resolve_platform(code)

    async def fetch_json(self, url: str, *, authenticated: bool = True) -> Any:
        """GET ``url`` once and return the decoded JSON body.

        Raises:
            TransportError: the request never got a response.
            HttpStatusError: the response status is not 2xx.
            DecodeError: the body is not valid JSON.
        """
        if self.session is None:
            raise RuntimeError("RiotAPIClient must be used inside 'async with'")

        headers = self.get_headers() if authenticated else None
        try:
            response = await self.session.get(url, headers=headers)
        except httpx.RequestError as exc:
            logger.warning(f"Network error for {url}: {exc!r}")
            raise TransportError(url, exc) from exc

        if not response.is_success:
            if response.status_code in (401, 403):
                logger.warning(f"HTTP {response.status_code} for {url}, check RIOT_API_KEY")
            else:
                logger.warning(f"HTTP {response.status_code} for {url}")
            raise HttpStatusError(response.status_code, url)

        try:
            return response.json()
        except ValueError as exc:
            logger.warning(f"Undecodable body from {url}")
            raise DecodeError(url) from exc

    # ── Data Dragon ────────────────────────────────────────────────────

    async def get_champions(self, version: Optional[str] = None) -> Dict[str, Any]:
        """Full champion.json payload; Data Dragon takes no API key."""
        url = endpoints.champions_url(version or self.ddragon_version, self.ddragon_locale)
        return await self.fetch_json(url, authenticated=False)

    # ── Summoner API ───────────────────────────────────────────────────

    async def get_summoner_by_name(self, region: RegionLike, name: str) -> Dict[str, Any]:
        url = endpoints.summoner_by_name_url(self.platform_for(region), name)
        return await self.fetch_json(url)

    # ── League API ─────────────────────────────────────────────────────

    async def get_league_entries(self, region: RegionLike, summoner_id: str) -> List[Dict[str, Any]]:
        url = endpoints.league_entries_url(self.platform_for(region), summoner_id)
        return await self.fetch_json(url)

    async def get_challenger_league(
        self,
        region: RegionLike,
        queue: Union[QueueType, str] = endpoints.DEFAULT_QUEUE,
    ) -> Dict[str, Any]:
        url = endpoints.challenger_league_url(self.platform_for(region), queue)
        return await self.fetch_json(url)

    # ── Champion Mastery API ───────────────────────────────────────────

    async def get_champion_mastery(self, region: RegionLike, summoner_id: str) -> List[Dict[str, Any]]:
        url = endpoints.champion_mastery_url(self.platform_for(region), summoner_id)
        return await self.fetch_json(url)

    # ── Spectator API ──────────────────────────────────────────────────

    async def get_featured_games(self, region: RegionLike) -> Dict[str, Any]:
        url = endpoints.featured_games_url(self.platform_for(region))
        return await self.fetch_json(url)

    # ── Match API ──────────────────────────────────────────────────────

    async def get_match_ids(
        self,
        region: RegionLike,
        puuid: str,
        count: int = endpoints.DEFAULT_MATCH_COUNT,
    ) -> List[str]:
        url = endpoints.match_ids_url(self.platform_for(region), puuid, count)
        return await self.fetch_json(url)

    async def get_match(self, region: RegionLike, match_id: str) -> Dict[str, Any]:
        url = endpoints.match_url(self.platform_for(region), match_id)
        return await self.fetch_json(url)
