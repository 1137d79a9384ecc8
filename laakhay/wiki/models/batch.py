"""Batch result types passed between the resolver, driver and consumers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from ..core import CacheStatus
from .page import PageInfo
from .response import AllPagesResponse


@dataclass(frozen=True)
class BatchResult:
    """One resolved batch and the cursor to the batch after it.

    Attributes:
        items: Pages in this batch, in API order
        next_token: Continuation token for the next batch (None on the final batch)
        token: Continuation token this batch was resolved for (None for the first)
        from_cache: Whether the batch was served from the local cache
    """

    items: list[PageInfo]
    next_token: str | None
    token: str | None = None
    from_cache: bool = False

    @property
    def is_last(self) -> bool:
        return self.next_token is None


@dataclass(frozen=True)
class CacheLookup:
    """Typed outcome of reading a cache entry.

    CORRUPT is currently handled the same way as MISS, but stays distinct so
    callers and tests can tell them apart.
    """

    status: CacheStatus
    identifier: str
    payload: bytes | None = None
    response: AllPagesResponse | None = None

    @property
    def is_hit(self) -> bool:
        return self.status is CacheStatus.HIT


@dataclass(frozen=True)
class NextBatch:
    """A batch produced by the pagination driver.

    Attributes:
        items: Pages in this batch
        index: 1-based position of the batch within the run
        token: Continuation token the batch was fetched with
        from_cache: Whether the batch came from the local cache
    """

    items: list[PageInfo]
    index: int
    token: str | None = None
    from_cache: bool = False

    @property
    def titles(self) -> list[str]:
        return [page.title for page in self.items]


class _DoneType:
    """Marker returned by the driver once the listing is exhausted."""

    _instance: _DoneType | None = None

    def __new__(cls) -> _DoneType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Done"

    def __bool__(self) -> bool:
        return False


Done: Final = _DoneType()

DriverResult = NextBatch | _DoneType
