#!/usr/bin/env python3
"""Fetch and cache the full allpages listing of a MediaWiki site.

Usage:
    python -m laakhay.wiki
    python -m laakhay.wiki --base-url https://en.wikipedia.org/w/api.php --namespace 0
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

from .clients import AllPagesClient
from .config import DEFAULT_CACHE_DIR, DEFAULT_DELAY, DEFAULT_TIMEOUT, WIKI_API_URL, WikiConfig
from .core import FetchError

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch a wiki's allpages listing with a local cache")
    p.add_argument("--base-url", default=WIKI_API_URL, help="MediaWiki api.php endpoint")
    p.add_argument("--cache-dir", type=Path, default=Path(DEFAULT_CACHE_DIR))
    p.add_argument("--delay", type=float, default=DEFAULT_DELAY, help="Seconds between requests")
    p.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT)
    p.add_argument("--namespace", type=int, default=None)
    p.add_argument(
        "--backoff-factor",
        type=float,
        default=1.0,
        help="Multiply the retry delay by this per consecutive failure (default: fixed delay)",
    )
    p.add_argument("--max-delay", type=float, default=None, help="Cap for the retry delay")
    p.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        help="Give up after this many consecutive failures (default: retry forever)",
    )
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)


async def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = WikiConfig(
        base_url=args.base_url,
        cache_dir=args.cache_dir,
        delay=args.delay,
        timeout=args.timeout,
        namespace=args.namespace,
        backoff_factor=args.backoff_factor,
        max_delay=args.max_delay,
        max_attempts=args.max_attempts,
    )
    async with AllPagesClient(config) as client:
        try:
            batches = await client.fetch_all_pages()
        except FetchError as e:
            logger.error(f"Giving up after {config.max_attempts} failed attempts: {e}")
            return 1
    print(f"Fetched {batches} batches into {config.cache_dir}")
    return 0


def run() -> None:
    raise SystemExit(asyncio.run(main()))


if __name__ == "__main__":
    run()
