"""Live featured game as shown in the spectator list."""
from dataclasses import dataclass, field
from typing import List, Optional

BLUE_TEAM_ID = 100
RED_TEAM_ID = 200
TEAM_SIZE = 5


@dataclass
class FeaturedParticipant:
    summoner_name: str
    champion_id: int
    team_id: int
    champion_name: str = 'Unknown'
    champion_image: Optional[str] = None


@dataclass
class FeaturedGame:
    game_id: int
    game_mode: str
    game_length: int  # Seconds
    blue_team: List[FeaturedParticipant] = field(default_factory=list)
    red_team: List[FeaturedParticipant] = field(default_factory=list)

    @property
    def duration(self) -> str:
        """Elapsed time as ``m:ss``."""
        minutes, seconds = divmod(max(self.game_length, 0), 60)
        return f"{minutes}:{seconds:02d}"
