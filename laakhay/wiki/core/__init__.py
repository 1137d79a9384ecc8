"""Core types: exceptions and enumerations."""

from .enums import CacheStatus, DriverState
from .exceptions import (
    CacheError,
    CacheReadError,
    CacheWriteError,
    FetchError,
    MalformedResponseError,
    WikiError,
)

__all__ = [
    "CacheStatus",
    "DriverState",
    "WikiError",
    "CacheError",
    "CacheReadError",
    "CacheWriteError",
    "FetchError",
    "MalformedResponseError",
]
