#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

from laakhay.wiki import AllPagesClient, Done, WikiConfig


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Print the first batches of a wiki's allpages listing")
    p.add_argument("base_url", nargs="?", default="https://runescape.wiki/api.php")
    p.add_argument("batches", nargs="?", type=int, default=3)
    p.add_argument("--cache-dir", type=Path, default=Path("__disk__"))
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO)

    config = WikiConfig(base_url=args.base_url, cache_dir=args.cache_dir)
    async with AllPagesClient(config) as client:
        driver = client.iter_batches()
        for _ in range(args.batches):
            batch = await driver.next()
            if batch is Done:
                break
            source = "cache" if batch.from_cache else "network"
            print("=" * 65)
            print(f"Batch      : {batch.index} ({source})")
            print(f"Cursor     : {batch.token or '<head>'}")
            print(f"Pages      : {len(batch.items)}")
            if batch.items:
                print(f"First/last : {batch.items[0].title} / {batch.items[-1].title}")
        print("=" * 65)


if __name__ == "__main__":
    asyncio.run(main())
