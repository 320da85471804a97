import pytest

from domain.enums import Region
from domain.routing import (
    PLATFORM_TO_ROUTE,
    REGION_TO_PLATFORM,
    resolve_platform,
    resolve_route,
)

EXPECTED_PLATFORMS = {
    "na": "na1",
    "euw": "euw1",
    "kr": "kr",
    "jp": "jp1",
    "br": "br1",
    "eune": "eun1",
    "lan": "la1",
    "las": "la2",
    "oce": "oc1",
    "tr": "tr1",
    "ru": "ru",
}

EXPECTED_ROUTES = {
    "na1": "americas",
    "br1": "americas",
    "la1": "americas",
    "la2": "americas",
    "euw1": "europe",
    "eun1": "europe",
    "tr1": "europe",
    "ru": "europe",
    "kr": "asia",
    "jp1": "asia",
    "oc1": "sea",
}


@pytest.mark.parametrize("code,platform", sorted(EXPECTED_PLATFORMS.items()))
def test_known_region_codes_resolve_to_platform(code, platform):
    assert resolve_platform(code) == platform


def test_region_codes_are_case_insensitive():
    assert resolve_platform("EUW") == "euw1"
    assert resolve_platform("Eune") == "eun1"
    assert resolve_platform("kR") == "kr"


@pytest.mark.parametrize("code", ["", "xx", "NaX", "euw1", "americas", " na", None])
def test_unknown_region_code_falls_back_to_na1(code):
    assert resolve_platform(code) == "na1"


@pytest.mark.parametrize("platform,route", sorted(EXPECTED_ROUTES.items()))
def test_known_platforms_resolve_to_route(platform, route):
    assert resolve_route(platform) == route


@pytest.mark.parametrize("platform", ["", "na", "euw", "ph2", "pbe1", "EUW1", "Kr", None])
def test_unknown_platform_falls_back_to_americas(platform):
    assert resolve_route(platform) == "americas"


def test_match_routing_goes_through_platform():
    assert resolve_route(resolve_platform("kr")) == "asia"
    assert resolve_route(resolve_platform("na")) == "americas"
    assert resolve_route(resolve_platform("euw")) == "europe"
    assert resolve_route(resolve_platform("oce")) == "sea"
    # region codes are not platform ids
    assert resolve_route("euw") == "americas"


def test_tables_are_total_and_immutable():
    assert set(REGION_TO_PLATFORM) == set(EXPECTED_PLATFORMS)
    assert set(REGION_TO_PLATFORM.values()) == set(PLATFORM_TO_ROUTE)
    with pytest.raises(TypeError):
        REGION_TO_PLATFORM["pbe"] = "pbe1"
    with pytest.raises(TypeError):
        PLATFORM_TO_ROUTE["pbe1"] = "americas"


def test_region_enum_matches_tables():
    for region in Region.all_regions():
        assert region.platform_route == EXPECTED_PLATFORMS[region.value]
        assert region.regional_route == EXPECTED_ROUTES[region.platform_route]
    assert Region.EUNE.friendly == "EUNE"


def test_region_from_code():
    assert Region.from_code("LAS") is Region.LAS
    assert Region.from_code("nowhere") is Region.NA
    assert Region.from_code(None) is Region.NA
