"""In-process cache of Data Dragon champion metadata."""
import asyncio
import logging
from typing import Any, Dict, Optional, Union

from infrastructure.api import RiotAPIClient, endpoints
from infrastructure.api.errors import DecodeError, NotFoundError

logger = logging.getLogger(__name__)

ChampionId = Union[int, str]


class ChampionCatalog:
    """Champion list fetched once and reused for the life of the instance.

    champion.json only changes with a game patch, so there is no expiry;
    call ``refresh()`` to force a new download. Concurrent first callers
    wait on one fetch instead of each issuing their own. A failed fetch
    leaves the catalog empty and the next call tries again.
    """

    def __init__(self, api_client: RiotAPIClient, version: Optional[str] = None):
        self.api_client = api_client
        self.version = version or api_client.ddragon_version
        self._champions: Optional[Dict[str, Dict[str, Any]]] = None
        self._lock = asyncio.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._champions is not None

    async def get_all(self) -> Dict[str, Dict[str, Any]]:
        """champion.json's ``data`` mapping, keyed by champion name id."""
        if self._champions is not None:
            return self._champions
        async with self._lock:
            if self._champions is None:
                self._champions = await self._fetch()
        return self._champions

    async def refresh(self) -> Dict[str, Dict[str, Any]]:
        async with self._lock:
            self._champions = None
            self._champions = await self._fetch()
        return self._champions

    async def get_by_id(self, champion_id: ChampionId) -> Optional[Dict[str, Any]]:
        """Entry whose numeric ``key`` equals ``champion_id``, or None."""
        wanted = str(champion_id)
        champions = await self.get_all()
        for champion in champions.values():
            if champion.get("key") == wanted:
                return champion
        return None

    async def require_by_id(self, champion_id: ChampionId) -> Dict[str, Any]:
        champion = await self.get_by_id(champion_id)
        if champion is None:
            raise NotFoundError(f"champion {champion_id} not found in Data Dragon {self.version}")
        return champion

    async def _fetch(self) -> Dict[str, Dict[str, Any]]:
        payload = await self.api_client.get_champions(self.version)
        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, dict):
            url = endpoints.champions_url(self.version, self.api_client.ddragon_locale)
            raise DecodeError(url, "champion.json has no 'data' object")
        logger.info(f"Loaded {len(data)} champions from Data Dragon {self.version}")
        return data
