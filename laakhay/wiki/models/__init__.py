"""Data models."""

from .batch import BatchResult, CacheLookup, Done, DriverResult, NextBatch
from .page import PageInfo
from .response import AllPagesResponse, ContinueBlock, QueryBlock

__all__ = [
    "PageInfo",
    "AllPagesResponse",
    "ContinueBlock",
    "QueryBlock",
    "BatchResult",
    "CacheLookup",
    "NextBatch",
    "Done",
    "DriverResult",
]
