"""In-memory query cache."""

import asyncio
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Optional

import logfire

from discuss.domain.repository.cache import Listener, QueryCache, QueryKey


@dataclass
class _Entry:
    value: Any
    fetched_at: float
    stale_after: Optional[float] = None
    invalidated: bool = False


def _matches(key: QueryKey, prefix: QueryKey) -> bool:
    return key[: len(prefix)] == prefix


class InMemoryQueryCache(QueryCache):
    """Process-local implementation of ``QueryCache``.

    Shared by every view of one client session and written only by the
    mutation use cases. Runs on a single event loop, so no locking: the
    only coordination is that concurrent fetches of one key share a task.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[QueryKey, _Entry] = {}
        self._inflight: dict[QueryKey, asyncio.Task] = {}
        # Keys invalidated while their fetch was in flight; the late result
        # is stored already stale so the next read fetches again.
        self._invalidated_inflight: set[QueryKey] = set()
        # Keys written with ``set`` while their fetch was in flight; the
        # late result is dropped so it cannot overwrite the newer value.
        self._superseded_inflight: set[QueryKey] = set()
        self._listeners: list[tuple[QueryKey, Listener]] = []

    def get(self, key: QueryKey) -> Optional[Any]:
        entry = self._entries.get(key)
        return entry.value if entry else None

    def set(self, key: QueryKey, value: Any) -> None:
        entry = self._entries.get(key)
        if callable(value):
            value = value(entry.value if entry else None)
            if value is None:
                return
            if entry is not None:
                # Local edits keep the entry's freshness
                entry.value = value
                self._notify(key)
                return
        elif key in self._inflight:
            self._superseded_inflight.add(key)
        self._entries[key] = _Entry(
            value=value,
            fetched_at=self._clock(),
            stale_after=entry.stale_after if entry else None,
        )
        self._notify(key)

    def invalidate(self, prefix: QueryKey) -> int:
        count = 0
        for key, entry in self._entries.items():
            if _matches(key, prefix):
                entry.invalidated = True
                count += 1
        inflight = [key for key in self._inflight if _matches(key, prefix)]
        self._invalidated_inflight.update(inflight)
        logfire.debug(
            "Query cache invalidated",
            prefix=repr(prefix),
            entries=count,
            inflight=len(inflight),
        )
        for key in [k for k in self._entries if _matches(k, prefix)]:
            self._notify(key)
        return count

    def remove(self, prefix: QueryKey) -> int:
        keys = [key for key in self._entries if _matches(key, prefix)]
        for key in keys:
            del self._entries[key]
            self._notify(key)
        return len(keys)

    def is_stale(self, key: QueryKey) -> bool:
        entry = self._entries.get(key)
        if entry is None or entry.invalidated:
            return True
        if entry.stale_after is None:
            return False
        return self._clock() - entry.fetched_at >= entry.stale_after

    async def fetch(
        self,
        key: QueryKey,
        fetcher: Callable[[], Awaitable[Any]],
        stale_after: Optional[float] = None,
    ) -> Any:
        entry = self._entries.get(key)
        if entry is not None:
            entry.stale_after = stale_after
            if not self.is_stale(key):
                return entry.value

        task = self._inflight.get(key)
        if task is None:
            task = asyncio.ensure_future(self._load(key, fetcher, stale_after))
            self._inflight[key] = task
        # A reader that goes away must not cancel the shared fetch
        return await asyncio.shield(task)

    async def _load(
        self,
        key: QueryKey,
        fetcher: Callable[[], Awaitable[Any]],
        stale_after: Optional[float],
    ) -> Any:
        try:
            value = await fetcher()
        finally:
            self._inflight.pop(key, None)
            invalidated = key in self._invalidated_inflight
            self._invalidated_inflight.discard(key)
            superseded = key in self._superseded_inflight
            self._superseded_inflight.discard(key)

        if superseded:
            entry = self._entries.get(key)
            logfire.debug("Superseded fetch result dropped", key=repr(key))
            return entry.value if entry is not None else value

        self._entries[key] = _Entry(
            value=value,
            fetched_at=self._clock(),
            stale_after=stale_after,
            invalidated=invalidated,
        )
        self._notify(key)
        return value

    def subscribe(self, prefix: QueryKey, listener: Listener) -> Callable[[], None]:
        subscription = (prefix, listener)
        self._listeners.append(subscription)

        def unsubscribe() -> None:
            if subscription in self._listeners:
                self._listeners.remove(subscription)

        return unsubscribe

    def _notify(self, key: QueryKey) -> None:
        for prefix, listener in list(self._listeners):
            if _matches(key, prefix):
                listener(key)
