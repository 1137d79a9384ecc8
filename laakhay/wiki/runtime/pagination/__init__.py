"""Resumable pagination over the MediaWiki allpages listing.

Architecture:
    - definitions.py: Pacing and retry policy (RetryPolicy)
    - resolver.py: Cache-first batch resolution (BatchResolver)
    - driver.py: Pull-based cursor over all batches (PaginationDriver)
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .definitions import RetryPolicy
from .driver import PaginationDriver
from .resolver import BatchResolver

__all__ = [
    "RetryPolicy",
    "BatchResolver",
    "PaginationDriver",
]
