"""Unit tests for InMemoryQueryCache."""

import asyncio

import pytest

from discuss.persistence.cache import InMemoryQueryCache


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class CountingFetcher:
    """Fetcher returning ``value-N`` on its N-th call."""

    def __init__(self, delay: float = 0) -> None:
        self.calls = 0
        self.delay = delay

    async def __call__(self) -> str:
        self.calls += 1
        call = self.calls
        if self.delay:
            await asyncio.sleep(self.delay)
        return f"value-{call}"


class TestInMemoryQueryCache:
    """Tests for the query cache substrate."""

    def setup_method(self):
        self.clock = FakeClock()
        self.cache = InMemoryQueryCache(clock=self.clock)

    @pytest.mark.asyncio
    async def test_fetch_caches_value(self):
        fetcher = CountingFetcher()

        first = await self.cache.fetch(("k",), fetcher)
        second = await self.cache.fetch(("k",), fetcher)

        assert first == second == "value-1"
        assert fetcher.calls == 1

    @pytest.mark.asyncio
    async def test_stale_after_expires_entry(self):
        fetcher = CountingFetcher()
        await self.cache.fetch(("k",), fetcher, stale_after=120)

        self.clock.now = 119
        assert await self.cache.fetch(("k",), fetcher, stale_after=120) == "value-1"

        self.clock.now = 120
        assert await self.cache.fetch(("k",), fetcher, stale_after=120) == "value-2"

    @pytest.mark.asyncio
    async def test_invalidate_prefix_marks_all_variants_stale(self):
        fetcher = CountingFetcher()
        await self.cache.fetch(("comments", "item", "n1", 1), fetcher)
        await self.cache.fetch(("comments", "item", "n1", 2), fetcher)
        await self.cache.fetch(("comments", "item", "n2", 1), fetcher)

        count = self.cache.invalidate(("comments", "item", "n1"))

        assert count == 2
        assert self.cache.is_stale(("comments", "item", "n1", 1))
        assert self.cache.is_stale(("comments", "item", "n1", 2))
        assert not self.cache.is_stale(("comments", "item", "n2", 1))
        # Stale data stays readable until refetched
        assert self.cache.get(("comments", "item", "n1", 1)) == "value-1"

    @pytest.mark.asyncio
    async def test_fetch_after_invalidate_refetches(self):
        fetcher = CountingFetcher()
        await self.cache.fetch(("k",), fetcher)

        self.cache.invalidate(("k",))

        assert await self.cache.fetch(("k",), fetcher) == "value-2"
        assert not self.cache.is_stale(("k",))

    @pytest.mark.asyncio
    async def test_concurrent_fetches_share_one_call(self):
        fetcher = CountingFetcher(delay=0.01)

        results = await asyncio.gather(
            self.cache.fetch(("k",), fetcher),
            self.cache.fetch(("k",), fetcher),
            self.cache.fetch(("k",), fetcher),
        )

        assert results == ["value-1"] * 3
        assert fetcher.calls == 1

    @pytest.mark.asyncio
    async def test_invalidate_during_fetch_stores_stale_result(self):
        fetcher = CountingFetcher(delay=0.01)

        task = asyncio.ensure_future(self.cache.fetch(("k",), fetcher))
        await asyncio.sleep(0)
        self.cache.invalidate(("k",))
        assert await task == "value-1"

        assert self.cache.is_stale(("k",))
        assert await self.cache.fetch(("k",), fetcher) == "value-2"

    @pytest.mark.asyncio
    async def test_set_during_fetch_keeps_written_value(self):
        release = asyncio.Event()

        async def slow_read():
            await release.wait()
            return "before"

        task = asyncio.ensure_future(self.cache.fetch(("detail", "c1"), slow_read))
        await asyncio.sleep(0)
        self.cache.set(("detail", "c1"), "after")
        release.set()

        assert await task == "after"
        assert self.cache.get(("detail", "c1")) == "after"
        assert not self.cache.is_stale(("detail", "c1"))

    @pytest.mark.asyncio
    async def test_updater_keeps_invalidated_entry_stale(self):
        fetcher = CountingFetcher()
        await self.cache.fetch(("comments", "item", "n1"), fetcher)
        self.cache.invalidate(("comments",))

        self.cache.set(("comments", "item", "n1"), lambda current: current + "+")
        self.cache.set(("comments", "item", "n1"), lambda current: current[:-1])

        assert self.cache.get(("comments", "item", "n1")) == "value-1"
        assert self.cache.is_stale(("comments", "item", "n1"))
        assert await self.cache.fetch(("comments", "item", "n1"), fetcher) == "value-2"

    @pytest.mark.asyncio
    async def test_updater_keeps_fetch_time(self):
        fetcher = CountingFetcher()
        await self.cache.fetch(("k",), fetcher, stale_after=120)

        self.clock.now = 100
        self.cache.set(("k",), lambda current: current + "+")

        self.clock.now = 120
        assert self.cache.get(("k",)) == "value-1+"
        assert self.cache.is_stale(("k",))

    @pytest.mark.asyncio
    async def test_failed_fetch_is_not_cached(self):
        async def failing():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            await self.cache.fetch(("k",), failing)

        assert self.cache.get(("k",)) is None
        assert await self.cache.fetch(("k",), CountingFetcher()) == "value-1"

    def test_set_value_is_fresh(self):
        self.cache.set(("k",), "v")

        assert self.cache.get(("k",)) == "v"
        assert not self.cache.is_stale(("k",))

    def test_set_with_updater(self):
        self.cache.set(("k",), 1)

        self.cache.set(("k",), lambda current: current + 1)

        assert self.cache.get(("k",)) == 2

    def test_updater_returning_none_changes_nothing(self):
        self.cache.set(("k",), lambda current: None)

        assert self.cache.get(("k",)) is None
        assert self.cache.is_stale(("k",))

    def test_remove_drops_entries(self):
        self.cache.set(("comments", "detail", "c1"), "a")
        self.cache.set(("comments", "detail", "c2"), "b")
        self.cache.set(("other",), "c")

        assert self.cache.remove(("comments",)) == 2
        assert self.cache.get(("comments", "detail", "c1")) is None
        assert self.cache.get(("other",)) == "c"

    def test_missing_key_is_stale(self):
        assert self.cache.is_stale(("missing",))

    def test_subscribers_see_changes_under_prefix(self):
        seen = []
        unsubscribe = self.cache.subscribe(("comments",), seen.append)

        self.cache.set(("comments", "detail", "c1"), "a")
        self.cache.set(("other",), "b")
        self.cache.invalidate(("comments",))
        unsubscribe()
        self.cache.set(("comments", "detail", "c1"), "c")

        assert seen == [("comments", "detail", "c1"), ("comments", "detail", "c1")]
