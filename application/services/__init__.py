"""Application services root exports."""
from .champion_catalog import ChampionCatalog
from .stats_service import StatsService, SummonerProfile, LeaderboardRow

__all__ = [
    "ChampionCatalog",
    "StatsService",
    "SummonerProfile",
    "LeaderboardRow",
]
