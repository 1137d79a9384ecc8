"""Shared fixtures for unit tests."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from laakhay.wiki.cache import DiskCacheStore
from laakhay.wiki.runtime.pagination import BatchResolver
from laakhay.wiki.runtime.rest import HTTPClient

BASE_URL = "https://wiki.example/api.php"


def allpages_body(titles: list[str], next_token: str | None = None) -> bytes:
    """Serialize an allpages response the way MediaWiki formats it."""
    body: dict = {"batchcomplete": "", "query": {"allpages": [{"title": t} for t in titles]}}
    if next_token is not None:
        body["continue"] = {"apcontinue": next_token, "continue": "-||"}
    return json.dumps(body).encode("utf-8")


class FakeWiki:
    """Simulated allpages API with N batches.

    Batch k is requested with token `batches[k-1][-1] + "~"` (None for the
    first); the last batch carries no continuation.
    """

    def __init__(self, batches: list[list[str]]) -> None:
        self.batches = batches
        self.tokens: list[str | None] = [None] + [f"{b[-1]}~" for b in batches[:-1]]
        self.calls: list[str | None] = []
        self.failures: dict[str | None, int] = {}

    def fail(self, token: str | None, times: int = 1) -> None:
        self.failures[token] = times

    def body_for(self, token: str | None) -> bytes:
        k = self.tokens.index(token)
        next_token = self.tokens[k + 1] if k + 1 < len(self.tokens) else None
        return allpages_body(self.batches[k], next_token)

    async def get_bytes(self, url, params=None, headers=None) -> bytes:
        token = (params or {}).get("apcontinue")
        self.calls.append(token)
        if self.failures.get(token, 0) > 0:
            self.failures[token] -= 1
            raise aiohttp.ClientConnectionError("connection reset")
        return self.body_for(token)


@pytest.fixture
def store(tmp_path) -> DiskCacheStore:
    return DiskCacheStore(tmp_path / "__disk__")


@pytest.fixture
def fake_wiki() -> FakeWiki:
    return FakeWiki([["A1", "A2"], ["B1", "B2"], ["C1"]])


@pytest.fixture
def mock_http(fake_wiki) -> MagicMock:
    http = MagicMock(spec=HTTPClient)
    http.get_bytes = AsyncMock(side_effect=fake_wiki.get_bytes)
    return http


@pytest.fixture
def resolver(mock_http, store) -> BatchResolver:
    return BatchResolver(mock_http, store, BASE_URL)


@pytest.fixture
def sleeps() -> list[float]:
    return []


@pytest.fixture
def fake_sleep(sleeps):
    async def _sleep(seconds: float) -> None:
        sleeps.append(seconds)

    return _sleep


@pytest.fixture
def make_body():
    """Factory for raw allpages response bodies."""
    return allpages_body


@pytest.fixture
def make_wiki():
    """Factory for simulated wikis with custom batches."""
    return FakeWiki


@pytest.fixture
def base_url() -> str:
    return BASE_URL
