"""Rank tier enumeration."""
from enum import Enum
from typing import Optional


class Rank(Enum):
    """League of Legends rank tiers, lowest first."""

    IRON = "IRON"
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"
    EMERALD = "EMERALD"
    DIAMOND = "DIAMOND"
    MASTER = "MASTER"
    GRANDMASTER = "GRANDMASTER"
    CHALLENGER = "CHALLENGER"

    @property
    def is_apex(self) -> bool:
        """Master and above have no divisions."""
        return self in (Rank.MASTER, Rank.GRANDMASTER, Rank.CHALLENGER)

    @classmethod
    def from_string(cls, rank_str: Optional[str]) -> Optional['Rank']:
        """Create Rank from string; None when the tier is unknown."""
        try:
            return cls[(rank_str or "").upper()]
        except KeyError:
            return None
