"""Domain entities."""
from .summoner import Summoner
from .league_entry import LeagueEntry
from .champion import Champion
from .featured_game import FeaturedGame, FeaturedParticipant

__all__ = [
    'Summoner',
    'LeagueEntry',
    'Champion',
    'FeaturedGame',
    'FeaturedParticipant',
]
