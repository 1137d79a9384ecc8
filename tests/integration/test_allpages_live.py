"""Integration test walking a live MediaWiki allpages listing."""

import os

import pytest

from laakhay.wiki import AllPagesClient, PaginationDriver

pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_LAAKHAY_NETWORK_TESTS") != "1",
    reason="Requires network access to a MediaWiki API",
)


class TestAllPagesLive:
    """Test the first batches of a real wiki."""

    @pytest.mark.asyncio
    async def test_first_two_batches_then_cache(self, live_config):
        async with AllPagesClient(live_config) as client:
            driver: PaginationDriver = client.iter_batches()
            first = await driver.next()
            second = await driver.next()

            assert len(first.items) == 5
            assert first.titles[-1] < second.titles[0]
            assert not first.from_cache

            replay = client.iter_batches()
            cached = await replay.next()

        assert cached.from_cache
        assert cached.titles == first.titles
