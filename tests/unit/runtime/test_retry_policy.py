"""Unit tests for RetryPolicy."""

from __future__ import annotations

import pytest

from laakhay.wiki.runtime.pagination import RetryPolicy


class TestRetryPolicy:
    """Test RetryPolicy delays and limits."""

    def test_defaults_fixed_and_unbounded(self):
        policy = RetryPolicy()
        assert policy.delay == 1.0
        assert [policy.retry_delay(n) for n in (1, 2, 10)] == [1.0, 1.0, 1.0]
        assert not policy.exhausted(10_000)

    def test_backoff_capped(self):
        policy = RetryPolicy(delay=0.5, backoff_factor=3.0, max_delay=4.0)
        assert [policy.retry_delay(n) for n in (1, 2, 3)] == [0.5, 1.5, 4.0]

    def test_exhausted(self):
        policy = RetryPolicy(max_attempts=2)
        assert not policy.exhausted(1)
        assert policy.exhausted(2)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"delay": -1},
            {"backoff_factor": 0.5},
            {"max_delay": -2},
            {"max_attempts": 0},
        ],
    )
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            RetryPolicy(**kwargs)
