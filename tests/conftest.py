import json
from typing import Callable, List

import httpx
import pytest

from infrastructure.api import RiotAPIClient

API_KEY = "RGAPI-test-key"

CHAMPION_PAYLOAD = {
    "type": "champion",
    "version": "13.6.1",
    "data": {
        "Aatrox": {"id": "Aatrox", "key": "266", "name": "Aatrox", "title": "the Darkin Blade", "tags": ["Fighter", "Tank"]},
        "Ahri": {"id": "Ahri", "key": "103", "name": "Ahri", "title": "the Nine-Tailed Fox", "tags": ["Mage", "Assassin"]},
        "MonkeyKing": {"id": "MonkeyKing", "key": "62", "name": "Wukong", "title": "the Monkey King", "tags": ["Fighter", "Tank"]},
    },
}


class RecordingRouter:
    """Serves canned responses by URL path and records every request."""

    def __init__(self) -> None:
        self.routes = {}
        self.requests: List[httpx.Request] = []

    def add(self, path: str, status: int = 200, body=None, text: str = None) -> None:
        self.routes[path] = (status, body, text)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path not in self.routes:
            return httpx.Response(404, json={"status": {"status_code": 404, "message": "Data not found"}})
        status, body, text = self.routes[request.url.path]
        if text is not None:
            return httpx.Response(status, text=text)
        return httpx.Response(status, content=json.dumps(body).encode(), headers={"Content-Type": "application/json"})

    def hits(self, path: str) -> int:
        return sum(1 for r in self.requests if r.url.path == path)


@pytest.fixture
def router() -> RecordingRouter:
    r = RecordingRouter()
    r.add("/cdn/13.6.1/data/en_US/champion.json", body=CHAMPION_PAYLOAD)
    return r


@pytest.fixture
def client_factory(router) -> Callable[[], RiotAPIClient]:
    def factory() -> RiotAPIClient:
        return RiotAPIClient(
            API_KEY,
            ddragon_version="13.6.1",
            ddragon_locale="en_US",
            transport=httpx.MockTransport(router),
        )
    return factory
