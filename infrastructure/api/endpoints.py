"""Centralized location for Riot API and Data Dragon endpoints.

Every builder is a pure string function; none of them touch the network.
Platform-scoped builders take a platform id (``na1``). The match-v5
builders take the same platform id and route it to its continent host
themselves, so a caller can never address match data by shard.
"""
from typing import Union
from urllib.parse import quote

from domain.enums import QueueType
from domain.routing import resolve_route

DDRAGON_CDN = "https://ddragon.leagueoflegends.com"
DEFAULT_QUEUE = QueueType.RANKED_SOLO_5x5.value
DEFAULT_MATCH_COUNT = 5


def _segment(value: object) -> str:
    """Percent-encode one path segment (``encodeURIComponent`` semantics)."""
    return quote(str(value), safe="-_.!~*'()")


def _platform_base(platform: str) -> str:
    return f"https://{platform}.api.riotgames.com"


def _regional_base(platform: str) -> str:
    return f"https://{resolve_route(platform)}.api.riotgames.com"


# ── Data Dragon ────────────────────────────────────────────────────────

def champions_url(version: str, locale: str = "en_US") -> str:
    return f"{DDRAGON_CDN}/cdn/{version}/data/{locale}/champion.json"


def champion_image_url(version: str, champion_id: str) -> str:
    return f"{DDRAGON_CDN}/cdn/{version}/img/champion/{_segment(champion_id)}.png"


def profile_icon_url(version: str, icon_id: int) -> str:
    return f"{DDRAGON_CDN}/cdn/{version}/img/profileicon/{icon_id}.png"


# ── Platform-scoped ────────────────────────────────────────────────────

def summoner_by_name_url(platform: str, summoner_name: str) -> str:
    return f"{_platform_base(platform)}/lol/summoner/v4/summoners/by-name/{_segment(summoner_name)}"


def league_entries_url(platform: str, summoner_id: str) -> str:
    return f"{_platform_base(platform)}/lol/league/v4/entries/by-summoner/{_segment(summoner_id)}"


def champion_mastery_url(platform: str, summoner_id: str) -> str:
    return (
        f"{_platform_base(platform)}/lol/champion-mastery/v4/"
        f"champion-masteries/by-summoner/{_segment(summoner_id)}"
    )


def featured_games_url(platform: str) -> str:
    return f"{_platform_base(platform)}/lol/spectator/v4/featured-games"


def challenger_league_url(platform: str, queue: Union[QueueType, str] = DEFAULT_QUEUE) -> str:
    queue_name = queue.api_queue_name if isinstance(queue, QueueType) else queue
    return f"{_platform_base(platform)}/lol/league/v4/challengerleagues/by-queue/{_segment(queue_name)}"


# ── Match-v5 (regional) ────────────────────────────────────────────────

def match_ids_url(platform: str, puuid: str, count: int = DEFAULT_MATCH_COUNT) -> str:
    return f"{_regional_base(platform)}/lol/match/v5/matches/by-puuid/{_segment(puuid)}/ids?count={int(count)}"


def match_url(platform: str, match_id: str) -> str:
    return f"{_regional_base(platform)}/lol/match/v5/matches/{_segment(match_id)}"
