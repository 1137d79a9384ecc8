"""Unit tests for configuration and URL building."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from laakhay.wiki.config import (
    DEFAULT_CACHE_DIR,
    WIKI_API_URL,
    WikiConfig,
    build_query_params,
    build_query_url,
)


class TestBuildQueryUrl:
    """Test allpages URL construction."""

    def test_first_page(self):
        assert build_query_url("https://wiki.example/api.php", None) == (
            "https://wiki.example/api.php?action=query&list=allpages&aplimit=max&format=json"
        )

    def test_continuation_appended(self):
        assert build_query_url("https://wiki.example/api.php", "Zulrah").endswith(
            "&format=json&apcontinue=Zulrah"
        )

    def test_continuation_is_encoded(self):
        url = build_query_url("https://wiki.example/api.php", "A&B=C")
        assert url.endswith("&apcontinue=A%26B%3DC")

    def test_namespace_and_limit(self):
        params = build_query_params(None, limit=50, namespace=0)
        assert params["aplimit"] == "50"
        assert params["apnamespace"] == "0"
        assert "apcontinue" not in params


class TestWikiConfig:
    """Test WikiConfig defaults and validation."""

    def test_defaults(self):
        config = WikiConfig()
        assert config.base_url == WIKI_API_URL
        assert config.cache_dir == Path(DEFAULT_CACHE_DIR)
        assert config.delay == 1.0
        assert config.max_attempts is None

    def test_negative_delay_invalid(self):
        with pytest.raises(ValidationError):
            WikiConfig(delay=-1)

    def test_zero_max_attempts_invalid(self):
        with pytest.raises(ValidationError):
            WikiConfig(max_attempts=0)

    def test_frozen(self):
        config = WikiConfig()
        with pytest.raises(ValidationError):
            config.delay = 5.0

    def test_backoff_defaults_keep_fixed_delay(self):
        config = WikiConfig()
        assert config.backoff_factor == 1.0
        assert config.max_delay is None

    def test_backoff_factor_below_one_invalid(self):
        with pytest.raises(ValidationError):
            WikiConfig(backoff_factor=0.5)
