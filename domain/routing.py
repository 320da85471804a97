"""Region code → platform id → regional route resolution.

Riot serves most endpoints from a per-shard *platform* host (``na1``,
``euw1``, ...) but partitions match-v5 data by continent (``americas``,
``europe``, ``asia``, ``sea``). Both lookups are total: unknown input maps
to a fixed default instead of failing.
"""
from types import MappingProxyType
from typing import Mapping, Optional

DEFAULT_PLATFORM = "na1"
DEFAULT_ROUTE = "americas"

REGION_TO_PLATFORM: Mapping[str, str] = MappingProxyType({
    "na":   "na1",
    "euw":  "euw1",
    "kr":   "kr",
    "jp":   "jp1",
    "br":   "br1",
    "eune": "eun1",
    "lan":  "la1",
    "las":  "la2",
    "oce":  "oc1",
    "tr":   "tr1",
    "ru":   "ru",
})

PLATFORM_TO_ROUTE: Mapping[str, str] = MappingProxyType({
    # Americas
    "na1": "americas",
    "br1": "americas",
    "la1": "americas",
    "la2": "americas",

    # Europe
    "euw1": "europe",
    "eun1": "europe",
    "tr1":  "europe",
    "ru":   "europe",

    # Asia
    "kr":  "asia",
    "jp1": "asia",

    # SEA
    "oc1": "sea",
})


def resolve_platform(region_code: Optional[str]) -> str:
    """Platform id for a user-facing region code, ``na1`` when unknown."""
    if not region_code:
        return DEFAULT_PLATFORM
    return REGION_TO_PLATFORM.get(region_code.lower(), DEFAULT_PLATFORM)


def resolve_route(platform_id: Optional[str]) -> str:
    """Regional route for a platform id, ``americas`` when unknown.

    Platform ids are matched exactly; ``EUW1`` is not ``euw1``.
    """
    if not platform_id:
        return DEFAULT_ROUTE
    return PLATFORM_TO_ROUTE.get(platform_id, DEFAULT_ROUTE)
