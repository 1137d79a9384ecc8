"""Structured logging for pagination operations.

This module provides telemetry hooks for the resolver and driver, emitting
structured logs with the batch index and cursor attached.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_batch_fetched(
    *,
    batch_index: int,
    token: str | None,
    items: int,
    from_cache: bool,
    latency_ms: float | None = None,
) -> None:
    """Log a successfully resolved batch.

    Args:
        batch_index: 1-based batch position in the run
        token: Continuation token the batch was resolved for
        items: Number of pages in the batch
        from_cache: Whether the batch came from the local cache
        latency_ms: Resolve latency in milliseconds (optional)
    """
    logger.debug(
        "batch_fetched",
        extra={
            "batch_index": batch_index,
            "token": token,
            "items": items,
            "from_cache": from_cache,
            "latency_ms": latency_ms,
        },
    )


def log_batch_error(
    *,
    batch_index: int,
    token: str | None,
    attempt: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed attempt to resolve a batch.

    Args:
        batch_index: 1-based position of the batch being attempted
        token: Cursor that will be retried
        attempt: Consecutive failed attempts for this cursor
        error_type: Type of error (e.g., "FetchError", "MalformedResponseError")
        error_message: Error message
    """
    logger.error(
        f"Failed to fetch batch {batch_index} at {token}: {error_message}",
        extra={
            "event": "batch_error",
            "batch_index": batch_index,
            "token": token,
            "attempt": attempt,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_cache_corrupt(*, identifier: str, token: str | None, error_message: str) -> None:
    logger.warning(
        "cache_corrupt",
        extra={"identifier": identifier, "token": token, "error_message": error_message},
    )


def log_cache_write_failed(*, identifier: str, token: str | None, error_message: str) -> None:
    logger.warning(
        "cache_write_failed",
        extra={"identifier": identifier, "token": token, "error_message": error_message},
    )


def log_pagination_complete(*, batches: int, network_batches: int, failures: int) -> None:
    """Log the end of a pagination run.

    Args:
        batches: Batches produced
        network_batches: Batches that required a network request
        failures: Failed attempts that were retried
    """
    logger.info(
        "pagination_complete",
        extra={
            "batches": batches,
            "network_batches": network_batches,
            "failures": failures,
        },
    )
