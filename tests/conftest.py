"""Shared fixtures: Giphy payloads, a mocked upstream and the relay app."""

from __future__ import annotations

import asyncio
from typing import Callable

import httpx
import pytest
import pytest_asyncio

from gif_explorer.infrastructure.giphy_client import GiphyClient, get_giphy_client
from gif_explorer.main import app
from gif_explorer.schemas import MediaItem

API_KEY = "test-secret-key"


def giphy_item(index: int, prefix: str = "gif") -> dict:
    item_id = f"{prefix}{index}"
    return {
        "type": "gif",
        "id": item_id,
        "url": f"https://giphy.com/gifs/{item_id}",
        "title": f"GIF {index}",
        "rating": "pg",
        "username": "",
        "source": "",
        "source_tld": "",
        "import_datetime": "2021-03-04 10:20:30",
        "trending_datetime": "0000-00-00 00:00:00",
        "images": {
            "fixed_height": {"url": f"https://media.giphy.com/{item_id}/200.gif", "width": "356", "height": "200"},
            "original": {"url": f"https://media.giphy.com/{item_id}/giphy.gif", "width": "480", "height": "270"},
        },
    }


def real_giphy_item(index: int, prefix: str = "gif") -> dict:
    """Item shaped like a live Giphy answer: extra keys, url-less renditions."""
    item = giphy_item(index, prefix)
    item_id = item["id"]
    item.update(
        slug=f"funny-{item_id}",
        bitly_url=f"https://gph.is/{item_id}",
        embed_url=f"https://giphy.com/embed/{item_id}",
        is_sticker=0,
        user={"avatar_url": "https://media.giphy.com/avatars/x.gif", "username": "studio"},
        analytics_response_payload="e=abc",
        analytics={"onload": {"url": "https://giphy-analytics.giphy.com/onload"}},
    )
    item["images"].update(
        {
            "original": {
                "height": "270",
                "width": "480",
                "size": "1538201",
                "url": f"https://media.giphy.com/{item_id}/giphy.gif",
                "mp4_size": "523478",
                "mp4": f"https://media.giphy.com/{item_id}/giphy.mp4",
                "webp": f"https://media.giphy.com/{item_id}/giphy.webp",
                "frames": "40",
                "hash": "8c7a3e1f",
            },
            "original_mp4": {"height": "270", "width": "480", "mp4_size": "523478", "mp4": f"https://media.giphy.com/{item_id}/giphy.mp4"},
            "looping": {"mp4_size": "2489511", "mp4": f"https://media.giphy.com/{item_id}/giphy-loop.mp4"},
            "preview": {"height": "130", "width": "232", "mp4_size": "39117", "mp4": f"https://media.giphy.com/{item_id}/giphy-preview.mp4"},
            "hd": {"height": "", "width": "", "mp4": ""},
            "480w_still": {"height": "270", "width": "480", "url": f"https://media.giphy.com/{item_id}/480w_s.jpg"},
        }
    )
    return item


def giphy_page(count: int, start: int = 0, prefix: str = "gif", realistic: bool = False) -> dict:
    make = real_giphy_item if realistic else giphy_item
    return {
        "data": [make(start + i, prefix) for i in range(count)],
        "pagination": {"total_count": 1000, "count": count, "offset": start},
        "meta": {"status": 200, "msg": "OK", "response_id": "abc"},
    }


def media_items(count: int, start: int = 0, prefix: str = "gif") -> list[MediaItem]:
    return [MediaItem.model_validate(giphy_item(start + i, prefix)) for i in range(count)]


class FakeRelay:
    """In-memory relay recording every page request.

    ``pages`` maps (endpoint, query, offset) to a page size or an exception.
    With ``gated`` set, each request waits until ``release`` is called for it.
    """

    def __init__(self, pages: dict | None = None, gated: bool = False) -> None:
        self.pages = pages or {}
        self.calls: list[tuple[str, str, int]] = []
        self.gated = gated
        self._gates: dict[tuple[str, str, int], asyncio.Event] = {}
        self.stopped = False

    def release(self, endpoint: str, query: str, offset: int) -> None:
        self._gate((endpoint, query, offset)).set()

    def _gate(self, key):
        if key not in self._gates:
            self._gates[key] = asyncio.Event()
        return self._gates[key]

    async def _page(self, key):
        self.calls.append(key)
        if self.gated:
            await self._gate(key).wait()
        outcome = self.pages.get(key, 0)
        if isinstance(outcome, Exception):
            raise outcome
        endpoint, query, offset = key
        return media_items(outcome, start=offset, prefix=query or endpoint)

    async def trending(self, offset: int = 0, limit: int = 20):
        return await self._page(("trending", "", offset))

    async def search(self, query: str, offset: int = 0, limit: int = 20):
        return await self._page(("search", query, offset))

    async def stop(self) -> None:
        self.stopped = True


@pytest.fixture
def upstream_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_giphy(upstream_requests) -> Callable[..., GiphyClient]:
    """Build a started-later GiphyClient answering with ``handler``."""

    def factory(handler) -> GiphyClient:
        def recording(request: httpx.Request) -> httpx.Response:
            upstream_requests.append(request)
            return handler(request)

        return GiphyClient(
            api_key=API_KEY,
            base_url="https://upstream.test/v1/gifs",
            transport=httpx.MockTransport(recording),
        )

    return factory


@pytest_asyncio.fixture
async def relay_app(make_giphy):
    """Return a function wiring the app to a mocked upstream and an HTTP client."""

    clients: list[GiphyClient] = []

    async def wire(handler) -> httpx.AsyncClient:
        giphy = make_giphy(handler)
        await giphy.start()
        clients.append(giphy)
        app.dependency_overrides[get_giphy_client] = lambda: giphy
        return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://relay.test")

    yield wire

    app.dependency_overrides.clear()
    for giphy in clients:
        await giphy.stop()
