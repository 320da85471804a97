"""Ranked standing of one player in one queue."""
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..enums import Rank


@dataclass
class LeagueEntry:
    summoner_name: str
    league_points: int
    wins: int
    losses: int
    queue_type: Optional[str] = None
    tier: Optional[Rank] = None
    division: Optional[str] = None
    summoner_id: Optional[str] = None
    puuid: Optional[str] = None

    @classmethod
    def from_api(
        cls,
        payload: Mapping[str, Any],
        *,
        tier: Optional[str] = None,
        queue_type: Optional[str] = None,
    ) -> 'LeagueEntry':
        """Build from a LeagueEntryDTO or a LeagueItemDTO.

        Items inside a LeagueListDTO carry no tier or queue of their own;
        pass the list's values through ``tier`` and ``queue_type``.
        """
        return cls(
            summoner_name=payload.get('summonerName', ''),
            league_points=int(payload.get('leaguePoints', 0)),
            wins=int(payload.get('wins', 0)),
            losses=int(payload.get('losses', 0)),
            queue_type=payload.get('queueType', queue_type),
            tier=Rank.from_string(payload.get('tier', tier)),
            division=payload.get('rank'),
            summoner_id=payload.get('summonerId'),
            puuid=payload.get('puuid'),
        )

    @property
    def games(self) -> int:
        return self.wins + self.losses

    @property
    def winrate(self) -> float:
        """Win rate in percent, 0.0 when no games were played."""
        if self.games == 0:
            return 0.0
        return (self.wins / self.games) * 100

    @property
    def display_tier(self) -> str:
        if self.tier is None:
            return 'UNRANKED'
        if self.tier.is_apex or not self.division:
            return self.tier.value
        return f"{self.tier.value} {self.division}"
