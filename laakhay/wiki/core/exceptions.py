"""Custom exception hierarchy."""

from __future__ import annotations

from pathlib import Path


class WikiError(Exception):
    """Base exception for all library errors."""

    pass


class CacheError(WikiError):
    """Error from the local response cache."""

    def __init__(
        self,
        message: str,
        identifier: str | None = None,
        path: Path | None = None,
    ) -> None:
        super().__init__(message)
        self.identifier = identifier
        self.path = path


class CacheReadError(CacheError):
    """Cached entry could not be read or decoded.

    Never escapes the resolver; a failed read is treated as a cache miss.
    """

    pass


class CacheWriteError(CacheError):
    """Fetched batch could not be persisted to the cache."""

    pass


class FetchError(WikiError):
    """A batch could not be retrieved from the remote wiki API."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        token: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.token = token
        self.status_code = status_code


class MalformedResponseError(FetchError):
    """Response body is not valid JSON or does not match the allpages shape."""

    pass
