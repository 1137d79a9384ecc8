"""Shared wiki API constants and run configuration.

This module centralizes the API URL, cache location and pacing defaults
used by the resolver, driver and client so they can stay small and focused.
"""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field

# MediaWiki api.php endpoint of the wiki being listed
WIKI_API_URL = "https://runescape.wiki/api.php"

# Relative to the working directory, matching the layout of earlier runs
DEFAULT_CACHE_DIR = "__disk__"

DEFAULT_DELAY = 1.0  # seconds between network round-trips
DEFAULT_TIMEOUT = 30.0
DEFAULT_LIMIT = "max"

# MediaWiki asks API clients to identify themselves
USER_AGENT = "laakhay-wiki/0.1 (allpages crawler; https://github.com/laakhay)"


def build_query_params(
    token: str | None,
    limit: int | str = DEFAULT_LIMIT,
    namespace: int | None = None,
) -> dict[str, str]:
    """Build the query string parameters for one `list=allpages` request.

    Args:
        token: Continuation token (`apcontinue`) or None for the first page
        limit: Value for `aplimit` ("max" or a positive integer)
        namespace: Optional `apnamespace` filter

    Returns:
        Ordered parameter mapping

    Examples:
        >>> build_query_params(None)
        {'action': 'query', 'list': 'allpages', 'aplimit': 'max', 'format': 'json'}
        >>> build_query_params("Foo")["apcontinue"]
        'Foo'
    """
    params = {
        "action": "query",
        "list": "allpages",
        "aplimit": str(limit),
        "format": "json",
    }
    if namespace is not None:
        params["apnamespace"] = str(namespace)
    if token is not None:
        params["apcontinue"] = token
    return params


def build_query_url(
    base_url: str,
    token: str | None,
    limit: int | str = DEFAULT_LIMIT,
    namespace: int | None = None,
) -> str:
    """Get the full URL for the page of the `allpages` query at `token`.

    Examples:
        >>> build_query_url("https://wiki.example/api.php", None)
        'https://wiki.example/api.php?action=query&list=allpages&aplimit=max&format=json'
        >>> build_query_url("https://wiki.example/api.php", "A b")
        'https://wiki.example/api.php?action=query&list=allpages&aplimit=max&format=json&apcontinue=A+b'
    """
    return f"{base_url}?{urlencode(build_query_params(token, limit, namespace))}"


class WikiConfig(BaseModel):
    """Settings for one crawl of the allpages listing."""

    base_url: str = Field(default=WIKI_API_URL, min_length=1)
    cache_dir: Path = Field(default=Path(DEFAULT_CACHE_DIR))
    delay: float = Field(default=DEFAULT_DELAY, ge=0)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    limit: int | str = DEFAULT_LIMIT
    namespace: int | None = None
    user_agent: str = USER_AGENT
    # Retry delay grows by backoff_factor per consecutive failure, capped at max_delay
    backoff_factor: float = Field(default=1.0, ge=1)
    max_delay: float | None = Field(default=None, ge=0)
    # None keeps retrying a failing batch forever
    max_attempts: int | None = Field(default=None, ge=1)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)
