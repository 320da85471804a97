"""Region enumeration for League of Legends servers."""
from enum import Enum
from typing import Optional

from ..routing import REGION_TO_PLATFORM, resolve_route


class Region(Enum):
    """League of Legends regional servers, keyed by their short code.

    Provides:
    - platform_route: platform host (e.g., euw1)
    - regional_route: routing host for match APIs (e.g., europe)
    - friendly: upper-case label for console output (e.g., EUW)
    """

    # Americas
    NA = "na"      # North America
    BR = "br"      # Brazil
    LAN = "lan"    # Latin America North
    LAS = "las"    # Latin America South

    # Europe
    EUW = "euw"    # Europe West
    EUNE = "eune"  # Europe Nordic & East
    TR = "tr"      # Turkey
    RU = "ru"      # Russia

    # Asia
    KR = "kr"      # Korea
    JP = "jp"      # Japan

    # Oceania
    OCE = "oce"    # Oceania

    @property
    def platform_route(self) -> str:
        """Get platform routing value for API calls."""
        return REGION_TO_PLATFORM[self.value]

    @property
    def regional_route(self) -> str:
        """Get regional routing for match APIs."""
        return resolve_route(self.platform_route)

    @property
    def friendly(self) -> str:
        return self.value.upper()

    @classmethod
    def from_code(cls, code: Optional[str]) -> 'Region':
        """Region for a short code, case-insensitive; NA when unknown."""
        try:
            return cls((code or "").lower())
        except ValueError:
            return cls.NA

    @classmethod
    def all_regions(cls) -> list['Region']:
        """Get all available regions."""
        return list(cls)
