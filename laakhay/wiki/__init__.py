"""Laakhay Wiki - cached, resumable MediaWiki allpages crawler."""

from .cache import DiskCacheStore, identifier_for, token_for
from .clients import AllPagesClient
from .config import WIKI_API_URL, WikiConfig, build_query_url
from .core import (
    CacheError,
    CacheReadError,
    CacheStatus,
    CacheWriteError,
    DriverState,
    FetchError,
    MalformedResponseError,
    WikiError,
)
from .models import (
    AllPagesResponse,
    BatchResult,
    CacheLookup,
    Done,
    NextBatch,
    PageInfo,
)
from .runtime import BatchResolver, HTTPClient, PaginationDriver, RetryPolicy

__version__ = "0.1.0"

__all__ = [
    # Client
    "AllPagesClient",
    "WikiConfig",
    "WIKI_API_URL",
    "build_query_url",
    # Runtime
    "HTTPClient",
    "BatchResolver",
    "PaginationDriver",
    "RetryPolicy",
    # Cache
    "DiskCacheStore",
    "identifier_for",
    "token_for",
    # Models
    "PageInfo",
    "AllPagesResponse",
    "BatchResult",
    "CacheLookup",
    "NextBatch",
    "Done",
    # Core
    "CacheStatus",
    "DriverState",
    "WikiError",
    "CacheError",
    "CacheReadError",
    "CacheWriteError",
    "FetchError",
    "MalformedResponseError",
]
