"""Runtime: HTTP transport and pagination."""

from .pagination import BatchResolver, PaginationDriver, RetryPolicy
from .rest import HTTPClient

__all__ = [
    "HTTPClient",
    "BatchResolver",
    "PaginationDriver",
    "RetryPolicy",
]
