"""Query cache interface."""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Hashable
from typing import Any, Optional

QueryKey = tuple[Hashable, ...]
Listener = Callable[[QueryKey], None]


class QueryCache(ABC):
    """Key-addressed store of fetched views.

    Keys are tuples; a key prefix addresses every entry that starts with
    it, so ``("comments",)`` covers the whole comment namespace and
    ``("comments", "item", "n1")`` covers every query variant for one item.

    Invalidation marks entries stale without dropping their data. The next
    ``fetch`` of a stale entry goes to the remote source.
    """

    @abstractmethod
    def get(self, key: QueryKey) -> Optional[Any]:
        """Return the cached value for ``key`` (stale or not), or None."""
        pass

    @abstractmethod
    def set(self, key: QueryKey, value: Any) -> None:
        """Write ``value`` for ``key`` and mark it fresh.

        A fetch of ``key`` already in flight is superseded: its result is
        not stored.

        If ``value`` is callable it is treated as an updater receiving the
        current value (or None) and returning the new one. An updater that
        returns None leaves the entry unchanged. An updater changes only the
        value of an existing entry, never its freshness.
        """
        pass

    @abstractmethod
    def invalidate(self, prefix: QueryKey) -> int:
        """Mark every entry under ``prefix`` stale.

        Returns:
            Number of entries marked stale
        """
        pass

    @abstractmethod
    def remove(self, prefix: QueryKey) -> int:
        """Drop every entry under ``prefix``.

        Returns:
            Number of entries removed
        """
        pass

    @abstractmethod
    def is_stale(self, key: QueryKey) -> bool:
        """Whether ``key`` is missing, invalidated or past its stale time."""
        pass

    @abstractmethod
    async def fetch(
        self,
        key: QueryKey,
        fetcher: Callable[[], Awaitable[Any]],
        stale_after: Optional[float] = None,
    ) -> Any:
        """Return the cached value, refetching it when stale.

        Concurrent fetches of the same key share one in-flight call.

        Args:
            key: Cache key
            fetcher: Coroutine factory performing the remote read
            stale_after: Seconds a fresh value stays fresh (None = until
                invalidated)
        """
        pass

    @abstractmethod
    def subscribe(self, prefix: QueryKey, listener: Listener) -> Callable[[], None]:
        """Call ``listener(key)`` whenever an entry under ``prefix`` changes.

        Returns:
            Function that removes the subscription
        """
        pass
