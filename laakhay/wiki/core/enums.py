"""Core enumerations shared by the cache and pagination layers."""

from enum import Enum


class CacheStatus(str, Enum):
    """Outcome of looking up a continuation token in the cache."""

    HIT = "hit"
    MISS = "miss"
    CORRUPT = "corrupt"  # entry exists but does not parse


class DriverState(str, Enum):
    """Pagination driver lifecycle."""

    START = "start"
    FETCHING = "fetching"
    DONE = "done"
