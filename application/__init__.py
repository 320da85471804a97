"""Application layer - Services."""
from .services import ChampionCatalog, StatsService

__all__ = [
    'ChampionCatalog',
    'StatsService',
]
