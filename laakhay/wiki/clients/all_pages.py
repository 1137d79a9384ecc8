"""High-level client that walks the whole allpages listing.

Wires the HTTP client, disk cache, resolver and driver together from a
`WikiConfig` and reports progress for every batch. The collected listing
is meant for later consumers (metadata lookups, filtering), so cached
batches never expire.
"""

from __future__ import annotations

import logging

from ..cache import DiskCacheStore
from ..config import WikiConfig
from ..models import NextBatch
from ..runtime.pagination import BatchResolver, PaginationDriver, RetryPolicy
from ..runtime.pagination.driver import Sleep
from ..runtime.rest import HTTPClient

logger = logging.getLogger(__name__)


class AllPagesClient:
    """Fetches every page of a wiki's allpages listing through the cache."""

    def __init__(
        self,
        config: WikiConfig | None = None,
        *,
        http: HTTPClient | None = None,
        store: DiskCacheStore | None = None,
        sleep: Sleep | None = None,
    ) -> None:
        self.config = config or WikiConfig()
        self._http = http or HTTPClient(
            timeout=self.config.timeout,
            headers={"User-Agent": self.config.user_agent},
        )
        self._owns_http = http is None
        self.store = store or DiskCacheStore(self.config.cache_dir)
        self.resolver = BatchResolver(
            self._http,
            self.store,
            self.config.base_url,
            limit=self.config.limit,
            namespace=self.config.namespace,
        )
        self.policy = RetryPolicy(
            delay=self.config.delay,
            backoff_factor=self.config.backoff_factor,
            max_delay=self.config.max_delay,
            max_attempts=self.config.max_attempts,
        )
        self._sleep = sleep

    def iter_batches(self) -> PaginationDriver:
        """Start a new pass over the listing."""
        if self._sleep is None:
            return PaginationDriver(self.resolver, self.policy)
        return PaginationDriver(self.resolver, self.policy, sleep=self._sleep)

    async def fetch_all_pages(self) -> int:
        """Walk the whole listing, logging each batch.

        Returns:
            Number of batches produced
        """
        count = 0
        async for batch in self.iter_batches():
            count += 1
            self._report(batch)
        return count

    async def collect_titles(self) -> list[str]:
        """Walk the whole listing and return every page title in order."""
        titles: list[str] = []
        async for batch in self.iter_batches():
            self._report(batch)
            titles.extend(batch.titles)
        return titles

    @staticmethod
    def _report(batch: NextBatch) -> None:
        if not batch.items:
            logger.info(f"Fetched batch {batch.index}: no pages")
            return
        logger.info(
            f"Fetched batch {batch.index}: Starting page: {batch.items[0].title}"
            f" / Ending page: {batch.items[-1].title}"
        )

    async def close(self) -> None:
        if self._owns_http:
            await self._http.close()

    async def __aenter__(self) -> AllPagesClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
