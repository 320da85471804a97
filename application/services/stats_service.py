"""Stats service: shapes Riot API payloads into the views the CLI prints."""
import asyncio
from dataclasses import dataclass, field
from typing import Any, Awaitable, Dict, List, Mapping, Optional, Union

from core.logging import context, get_logger, traceable
from domain.entities import (
    Champion,
    FeaturedGame,
    FeaturedParticipant,
    LeagueEntry,
    Summoner,
)
from domain.entities.featured_game import BLUE_TEAM_ID, RED_TEAM_ID, TEAM_SIZE
from domain.enums import QueueType
from infrastructure.api import RiotAPIClient, endpoints
from infrastructure.api.riot_client import RegionLike
from .champion_catalog import ChampionCatalog, ChampionId


async def _gather_all(*aws: Awaitable[Any]) -> List[Any]:
    """Run ``aws`` concurrently; on the first failure cancel the rest and wait for them."""
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


@dataclass
class SummonerProfile:
    summoner: Summoner
    entries: List[LeagueEntry] = field(default_factory=list)
    masteries: List[Dict[str, Any]] = field(default_factory=list)
    match_ids: List[str] = field(default_factory=list)
    profile_icon: Optional[str] = None


@dataclass
class LeaderboardRow:
    rank: int
    entry: LeagueEntry


class StatsService:
    """Summoner lookups, live games and leaderboards for one region at a time.

    Every method surfaces the first ``RiotAPIError`` it meets; nothing is
    retried or replaced with a default.
    """

    def __init__(self, api_client: RiotAPIClient, catalog: Optional[ChampionCatalog] = None):
        self.api = api_client
        self.catalog = catalog or ChampionCatalog(api_client)
        self._log = get_logger(__name__, service="stats")

    def _scope(self, region: RegionLike) -> context:
        return context(region=str(getattr(region, "value", region)), platform=self.api.platform_for(region))

    @traceable
    async def find_summoner(self, region: RegionLike, name: str) -> Summoner:
        async with self._scope(region):
            payload = await self.api.get_summoner_by_name(region, name)
            summoner = Summoner.from_api(payload)
            self._log.info(lambda: f"summoner-found {summoner.summoner_name} level={summoner.summoner_level}")
            return summoner

    @traceable
    async def summoner_profile(
        self,
        region: RegionLike,
        name: str,
        match_count: int = endpoints.DEFAULT_MATCH_COUNT,
    ) -> SummonerProfile:
        """Summoner plus ranked entries, mastery and recent match ids."""
        summoner = await self.find_summoner(region, name)
        async with self._scope(region):
            match_ids_task = self.api.get_match_ids(region, summoner.puuid, match_count)
            if summoner.summoner_id:
                entries_raw, masteries, match_ids = await _gather_all(
                    self.api.get_league_entries(region, summoner.summoner_id),
                    self.api.get_champion_mastery(region, summoner.summoner_id),
                    match_ids_task,
                )
            else:
                self._log.warning(lambda: f"summoner {summoner.summoner_name} has no summoner id; skipping league and mastery")
                entries_raw, masteries = [], []
                match_ids = await match_ids_task

        return SummonerProfile(
            summoner=summoner,
            entries=[LeagueEntry.from_api(e) for e in entries_raw or []],
            masteries=list(masteries or []),
            match_ids=list(match_ids or []),
            profile_icon=endpoints.profile_icon_url(self.catalog.version, summoner.profile_icon_id),
        )

    @traceable
    async def live_games(self, region: RegionLike, limit: Optional[int] = None) -> List[FeaturedGame]:
        """Featured games with both teams split out and champion names resolved."""
        async with self._scope(region):
            payload = await self.api.get_featured_games(region)
            games = (payload or {}).get("gameList") or []
            if limit is not None:
                games = games[:limit]
            result = [await self._featured_game(game) for game in games]
            self._log.info(lambda: f"live-games count={len(result)}")
            return result

    async def _featured_game(self, game: Mapping[str, Any]) -> FeaturedGame:
        participants = game.get("participants") or []
        blue = [p for p in participants if p.get("teamId") == BLUE_TEAM_ID][:TEAM_SIZE]
        red = [p for p in participants if p.get("teamId") == RED_TEAM_ID][:TEAM_SIZE]
        return FeaturedGame(
            game_id=int(game.get("gameId", 0)),
            game_mode=game.get("gameMode", ""),
            game_length=int(game.get("gameLength", 0)),
            blue_team=[await self._participant(p) for p in blue],
            red_team=[await self._participant(p) for p in red],
        )

    async def _participant(self, participant: Mapping[str, Any]) -> FeaturedParticipant:
        champion_id = int(participant.get("championId", 0))
        view = FeaturedParticipant(
            summoner_name=participant.get("summonerName") or participant.get("riotId", ""),
            champion_id=champion_id,
            team_id=int(participant.get("teamId", 0)),
        )
        champion = await self.catalog.get_by_id(champion_id)
        if champion is not None:
            view.champion_name = champion.get("name", view.champion_name)
            view.champion_image = endpoints.champion_image_url(self.catalog.version, champion["id"])
        return view

    @traceable
    async def leaderboard(
        self,
        region: RegionLike,
        queue: Union[QueueType, str] = endpoints.DEFAULT_QUEUE,
        top: int = 5,
    ) -> List[LeaderboardRow]:
        """Challenger players ordered by league points, highest first."""
        async with self._scope(region):
            payload = await self.api.get_challenger_league(region, queue) or {}
            entries = [
                LeagueEntry.from_api(item, tier=payload.get("tier"), queue_type=payload.get("queue"))
                for item in payload.get("entries") or []
            ]
            entries.sort(key=lambda e: e.league_points, reverse=True)
            rows = [LeaderboardRow(rank=i, entry=e) for i, e in enumerate(entries[:top], start=1)]
            self._log.info(lambda: f"leaderboard size={len(entries)} shown={len(rows)}")
            return rows

    async def champion(self, champion_id: ChampionId) -> Champion:
        return Champion.from_api(await self.catalog.require_by_id(champion_id))
