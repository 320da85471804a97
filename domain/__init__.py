"""Domain layer - Region routing, enums and entities."""
from .routing import (
    DEFAULT_PLATFORM,
    DEFAULT_ROUTE,
    PLATFORM_TO_ROUTE,
    REGION_TO_PLATFORM,
    resolve_platform,
    resolve_route,
)
from .entities import Summoner, LeagueEntry, Champion, FeaturedGame, FeaturedParticipant
from .enums import Region, QueueType, Rank

__all__ = [
    # Routing
    'DEFAULT_PLATFORM',
    'DEFAULT_ROUTE',
    'PLATFORM_TO_ROUTE',
    'REGION_TO_PLATFORM',
    'resolve_platform',
    'resolve_route',
    # Entities
    'Summoner',
    'LeagueEntry',
    'Champion',
    'FeaturedGame',
    'FeaturedParticipant',
    # Enums
    'Region',
    'QueueType',
    'Rank',
]
