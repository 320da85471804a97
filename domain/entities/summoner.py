"""Summoner entity representing a player account."""
from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass
class Summoner:
    """Represents a League of Legends summoner on one platform shard."""

    puuid: str
    summoner_id: Optional[str]
    account_id: Optional[str]
    summoner_name: str
    profile_icon_id: int
    summoner_level: int

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> 'Summoner':
        """Build from a summoner-v4 SummonerDTO."""
        return cls(
            puuid=payload['puuid'],
            summoner_id=payload.get('id'),
            account_id=payload.get('accountId'),
            summoner_name=payload.get('name', ''),
            profile_icon_id=int(payload.get('profileIconId', 0)),
            summoner_level=int(payload.get('summonerLevel', 0)),
        )
