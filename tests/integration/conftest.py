"""Shared fixtures for integration tests."""

import os

import pytest

from laakhay.wiki import WIKI_API_URL, WikiConfig


@pytest.fixture
def live_config(tmp_path) -> WikiConfig:
    """Config against LAAKHAY_WIKI_API_URL (default: the bundled wiki) with a scratch cache."""
    return WikiConfig(
        base_url=os.environ.get("LAAKHAY_WIKI_API_URL", WIKI_API_URL),
        cache_dir=tmp_path,
        limit=5,
    )
