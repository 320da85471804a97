import asyncio

import pytest

from application.services import ChampionCatalog
from infrastructure.api import DecodeError, HttpStatusError, NotFoundError

CHAMPIONS_PATH = "/cdn/13.6.1/data/en_US/champion.json"


def _with_catalog(factory, fn):
    async def go():
        async with factory() as api:
            return await fn(ChampionCatalog(api))
    return asyncio.run(go())


def test_get_by_id_finds_entry(client_factory):
    champion = _with_catalog(client_factory, lambda c: c.get_by_id("266"))
    assert champion["name"] == "Aatrox"
    assert champion["key"] == "266"


def test_get_by_id_accepts_int(client_factory):
    champion = _with_catalog(client_factory, lambda c: c.get_by_id(62))
    assert champion["id"] == "MonkeyKing"


def test_get_by_id_missing_returns_none(client_factory):
    assert _with_catalog(client_factory, lambda c: c.get_by_id("9999")) is None


def test_require_by_id_raises_not_found(client_factory):
    with pytest.raises(NotFoundError):
        _with_catalog(client_factory, lambda c: c.require_by_id(9999))


def test_list_is_fetched_once(router, client_factory):
    async def lookups(catalog):
        await catalog.get_by_id("266")
        await catalog.get_by_id("103")
        await catalog.get_all()
        return catalog.is_loaded

    assert _with_catalog(client_factory, lookups) is True
    assert router.hits(CHAMPIONS_PATH) == 1


def test_concurrent_first_callers_share_one_fetch(router, client_factory):
    async def lookups(catalog):
        return await asyncio.gather(*(catalog.get_by_id(k) for k in ("266", "103", "62", "1")))

    results = _with_catalog(client_factory, lookups)
    assert [r["name"] if r else None for r in results] == ["Aatrox", "Ahri", "Wukong", None]
    assert router.hits(CHAMPIONS_PATH) == 1


def test_refresh_fetches_again(router, client_factory):
    async def go(catalog):
        await catalog.get_all()
        await catalog.refresh()
        await catalog.get_all()

    _with_catalog(client_factory, go)
    assert router.hits(CHAMPIONS_PATH) == 2


def test_payload_without_data_is_decode_error(router, client_factory):
    router.add(CHAMPIONS_PATH, body={"type": "champion"})
    with pytest.raises(DecodeError):
        _with_catalog(client_factory, lambda c: c.get_all())


def test_failed_fetch_is_not_cached(router, client_factory):
    from .conftest import CHAMPION_PAYLOAD

    router.add(CHAMPIONS_PATH, status=500, body={})

    async def go(catalog):
        with pytest.raises(HttpStatusError):
            await catalog.get_all()
        assert not catalog.is_loaded
        router.add(CHAMPIONS_PATH, body=CHAMPION_PAYLOAD)
        return await catalog.get_by_id("266")

    assert _with_catalog(client_factory, go)["name"] == "Aatrox"
    assert router.hits(CHAMPIONS_PATH) == 2
