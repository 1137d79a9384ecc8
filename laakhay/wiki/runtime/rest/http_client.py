"""Async HTTP client wrapper."""

from __future__ import annotations

from typing import Any

import aiohttp


class HTTPClient:
    """Async HTTP client returning raw response bodies.

    Bodies are returned as bytes so callers can cache them verbatim before
    parsing.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = dict(headers or {})
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=self.headers)
        return self._session

    async def get_bytes(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> bytes:
        """GET request returning the full response body.

        Raises:
            aiohttp.ClientResponseError: On a non-2xx status
            aiohttp.ClientError: On connection failures
            asyncio.TimeoutError: When the request exceeds the timeout
        """
        async with self.session.get(url, params=params, headers=headers) as response:
            response.raise_for_status()
            return await response.read()

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
