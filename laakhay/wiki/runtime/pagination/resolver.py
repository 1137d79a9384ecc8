"""Cache-first resolution of one allpages batch.

The resolver maps a continuation token to a cache identifier, serves the
batch from the disk store when a parseable entry exists, and otherwise
requests it from the API and writes the raw body back to the store.
"""

from __future__ import annotations

import asyncio
import logging

import aiohttp
from pydantic import ValidationError

from ...cache import DiskCacheStore, identifier_for
from ...config import DEFAULT_LIMIT, build_query_params, build_query_url
from ...core import CacheStatus, CacheWriteError, FetchError, MalformedResponseError
from ...models import AllPagesResponse, BatchResult, CacheLookup
from ..rest import HTTPClient
from .telemetry import log_cache_corrupt, log_cache_write_failed

logger = logging.getLogger(__name__)


class BatchResolver:
    """Resolves continuation tokens to batches of pages."""

    def __init__(
        self,
        http: HTTPClient,
        store: DiskCacheStore,
        base_url: str,
        *,
        limit: int | str = DEFAULT_LIMIT,
        namespace: int | None = None,
    ) -> None:
        """Initialize batch resolver.

        Args:
            http: HTTP client used on cache misses
            store: Disk store holding raw responses
            base_url: MediaWiki api.php endpoint
            limit: Value for `aplimit`
            namespace: Optional `apnamespace` filter
        """
        self._http = http
        self._store = store
        self._base_url = base_url
        self._limit = limit
        self._namespace = namespace

    @property
    def store(self) -> DiskCacheStore:
        return self._store

    def url_for(self, token: str | None) -> str:
        return build_query_url(self._base_url, token, self._limit, self._namespace)

    def lookup(self, token: str | None) -> CacheLookup:
        """Look up the cached response for `token`."""
        identifier = identifier_for(token)
        payload = self._store.read_or_none(identifier)
        if payload is None:
            return CacheLookup(status=CacheStatus.MISS, identifier=identifier)

        try:
            response = AllPagesResponse.model_validate_json(payload)
        except ValidationError as e:
            log_cache_corrupt(identifier=identifier, token=token, error_message=str(e))
            return CacheLookup(status=CacheStatus.CORRUPT, identifier=identifier, payload=payload)

        return CacheLookup(
            status=CacheStatus.HIT, identifier=identifier, payload=payload, response=response
        )

    async def resolve(self, token: str | None) -> BatchResult:
        """Get the batch at `token` from the cache, or from the API.

        Raises:
            FetchError: If the cache has no usable entry and the request fails
            MalformedResponseError: If the API body is not a valid allpages response
        """
        cached = self.lookup(token)
        if cached.is_hit:
            assert cached.response is not None
            return self._to_result(cached.response, token, from_cache=True)

        raw = await self._fetch(token)
        try:
            response = AllPagesResponse.model_validate_json(raw)
        except ValidationError as e:
            raise MalformedResponseError(
                f"Invalid allpages response: {e}", url=self.url_for(token), token=token
            ) from e

        try:
            self._store.write_once(cached.identifier, raw)
        except CacheWriteError as e:
            log_cache_write_failed(identifier=cached.identifier, token=token, error_message=str(e))

        return self._to_result(response, token, from_cache=False)

    async def _fetch(self, token: str | None) -> bytes:
        url = self.url_for(token)
        logger.info(f"Fetching batch of pages from: {url}")

        params = build_query_params(token, self._limit, self._namespace)
        try:
            return await self._http.get_bytes(self._base_url, params=params)
        except aiohttp.ClientResponseError as e:
            raise FetchError(
                f"HTTP {e.status} from {url}", url=url, token=token, status_code=e.status
            ) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise FetchError(
                f"Request to {url} failed: {type(e).__name__}: {e}", url=url, token=token
            ) from e

    @staticmethod
    def _to_result(
        response: AllPagesResponse, token: str | None, *, from_cache: bool
    ) -> BatchResult:
        return BatchResult(
            items=list(response.pages),
            next_token=response.next_token,
            token=token,
            from_cache=from_cache,
        )
