"""Pacing and retry policy for the pagination driver."""

from __future__ import annotations

from dataclasses import dataclass

from ...config import DEFAULT_DELAY


@dataclass(frozen=True)
class RetryPolicy:
    """Delay between batches and retry behaviour for failed batches.

    The defaults pause a fixed `delay` between network round-trips and
    retry a failing batch forever with the same delay. Set `backoff_factor`,
    `max_delay` and `max_attempts` to grow the retry delay and give up
    after a number of consecutive failures.

    Attributes:
        delay: Seconds to wait between network round-trips and before a retry
        backoff_factor: Multiplier applied to the retry delay per consecutive failure
        max_delay: Upper bound for the retry delay (None = unbounded)
        max_attempts: Consecutive failed attempts before giving up (None = never)
    """

    delay: float = DEFAULT_DELAY
    backoff_factor: float = 1.0
    max_delay: float | None = None
    max_attempts: int | None = None

    def __post_init__(self) -> None:
        """Validate retry policy configuration."""
        if self.delay < 0:
            raise ValueError("RetryPolicy delay must be >= 0")
        if self.backoff_factor < 1:
            raise ValueError("RetryPolicy backoff_factor must be >= 1")
        if self.max_delay is not None and self.max_delay < 0:
            raise ValueError("RetryPolicy max_delay must be >= 0")
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ValueError("RetryPolicy max_attempts must be >= 1")

    def retry_delay(self, failures: int) -> float:
        """Delay before the next attempt after `failures` consecutive failures.

        Examples:
            >>> RetryPolicy(delay=1.0).retry_delay(5)
            1.0
            >>> RetryPolicy(delay=1.0, backoff_factor=2.0, max_delay=5.0).retry_delay(3)
            4.0
            >>> RetryPolicy(delay=1.0, backoff_factor=2.0, max_delay=5.0).retry_delay(4)
            5.0
        """
        value = self.delay * self.backoff_factor ** max(failures - 1, 0)
        if self.max_delay is not None:
            value = min(value, self.max_delay)
        return value

    def exhausted(self, failures: int) -> bool:
        return self.max_attempts is not None and failures >= self.max_attempts
