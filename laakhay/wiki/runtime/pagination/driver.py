"""Pull-based pagination over the allpages continuation protocol.

Architecture:
    The driver owns the cursor and walks the listing one batch per call to
    `next()`. Each call resolves the current cursor through the
    `BatchResolver` and returns a `NextBatch`, or `Done` once the API stops
    returning a continuation token.

    START ──next()──> FETCHING ──(no continuation)──> DONE
                        │   ▲
                        └───┘ FetchError: log, wait, retry same cursor

Pacing:
    After a batch that needed a network round-trip, the next resolve waits
    `RetryPolicy.delay`. The wait happens at the start of the following
    `next()` call, so a consumer that stops pulling never sleeps. Batches
    served from cache add no wait.

Failures:
    A failed resolve never advances the cursor. With the default policy the
    same cursor is retried forever after a fixed delay; `max_attempts`
    bounds this and re-raises the last error.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from time import perf_counter

from ...core import DriverState, FetchError
from ...models import Done, DriverResult, NextBatch
from .definitions import RetryPolicy
from .resolver import BatchResolver
from .telemetry import log_batch_error, log_batch_fetched, log_pagination_complete

Sleep = Callable[[float], Awaitable[None]]


class PaginationDriver:
    """Single-pass cursor over every batch of the allpages listing.

    A driver cannot be restarted; build a new one to walk the listing
    again. The new run is served from cache for every batch fetched before.
    """

    def __init__(
        self,
        resolver: BatchResolver,
        policy: RetryPolicy | None = None,
        *,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._resolver = resolver
        self._policy = policy or RetryPolicy()
        self._sleep = sleep

        self._state = DriverState.START
        self._cursor: str | None = None
        self._batches = 0
        self._network_batches = 0
        self._failures = 0
        self._consecutive_failures = 0
        self._pending_delay = 0.0

    @property
    def state(self) -> DriverState:
        return self._state

    @property
    def cursor(self) -> str | None:
        """Continuation token the next resolve will use."""
        return self._cursor

    @property
    def batches(self) -> int:
        return self._batches

    async def next(self) -> DriverResult:
        """Produce the next batch, or `Done` once the listing is exhausted.

        Raises:
            FetchError: Only when `max_attempts` consecutive attempts failed
        """
        if self._state is DriverState.DONE:
            return Done
        self._state = DriverState.FETCHING

        while True:
            if self._pending_delay > 0:
                await self._sleep(self._pending_delay)
            self._pending_delay = 0.0

            started = perf_counter()
            try:
                result = await self._resolver.resolve(self._cursor)
            except FetchError as e:
                self._failures += 1
                self._consecutive_failures += 1
                log_batch_error(
                    batch_index=self._batches + 1,
                    token=self._cursor,
                    attempt=self._consecutive_failures,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                if self._policy.exhausted(self._consecutive_failures):
                    self._finish()
                    raise
                self._pending_delay = self._policy.retry_delay(self._consecutive_failures)
                continue
            break

        self._consecutive_failures = 0
        self._batches += 1
        if not result.from_cache:
            self._network_batches += 1
        log_batch_fetched(
            batch_index=self._batches,
            token=result.token,
            items=len(result.items),
            from_cache=result.from_cache,
            latency_ms=(perf_counter() - started) * 1000.0,
        )

        batch = NextBatch(
            items=result.items,
            index=self._batches,
            token=result.token,
            from_cache=result.from_cache,
        )

        if result.next_token is None:
            self._finish()
        else:
            self._cursor = result.next_token
            # pace network round-trips only, never cache reads
            if not result.from_cache:
                self._pending_delay = self._policy.delay

        return batch

    def _finish(self) -> None:
        self._state = DriverState.DONE
        self._pending_delay = 0.0
        log_pagination_complete(
            batches=self._batches,
            network_batches=self._network_batches,
            failures=self._failures,
        )

    def __aiter__(self) -> PaginationDriver:
        return self

    async def __anext__(self) -> NextBatch:
        result = await self.next()
        if result is Done:
            raise StopAsyncIteration
        return result
