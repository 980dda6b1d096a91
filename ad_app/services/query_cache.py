"""Injectable result cache with per-key in-flight deduplication."""

from __future__ import annotations

import asyncio
import logging
from collections import OrderedDict
from typing import Awaitable, Callable, NamedTuple

from ad_app.models import ListQuery, ListQueryResult

logger = logging.getLogger(__name__)

Loader = Callable[[], Awaitable[ListQueryResult]]


class CacheKey(NamedTuple):
    resource_kind: str
    page: int
    limit: int
    search_text: str

    @classmethod
    def for_query(cls, resource_kind: str, query: ListQuery) -> "CacheKey":
        return cls(resource_kind, query.page, query.limit, query.search_text)


def _consume_result(task: asyncio.Task) -> None:
    # Waiters may all have been cancelled; keep asyncio from warning about
    # an exception nobody retrieved.
    if not task.cancelled():
        task.exception()


class QueryCache:
    """Cache of list results keyed by ``(resource_kind, page, limit, search)``.

    At most one fetch per key runs at a time; concurrent callers share it.
    Failed fetches are not stored. ``max_entries`` bounds the cache, evicting
    the least recently used entry first.
    """

    def __init__(self, max_entries: int | None = None) -> None:
        if max_entries is not None and max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self._max_entries = max_entries
        self._results: OrderedDict[CacheKey, ListQueryResult] = OrderedDict()
        self._inflight: dict[CacheKey, asyncio.Task[ListQueryResult]] = {}

    def __len__(self) -> int:
        return len(self._results)

    def __contains__(self, key: object) -> bool:
        return key in self._results

    def get(self, key: CacheKey) -> ListQueryResult | None:
        result = self._results.get(key)
        if result is not None:
            self._results.move_to_end(key)
        return result

    def is_inflight(self, key: CacheKey) -> bool:
        return key in self._inflight

    async def fetch(self, key: CacheKey, loader: Loader) -> ListQueryResult:
        """Return the cached result for *key* or run *loader* once for it."""
        cached = self.get(key)
        if cached is not None:
            logger.debug("Cache hit for %s", key)
            return cached
        task = self._inflight.get(key)
        if task is None:
            task = asyncio.ensure_future(self._run(key, loader))
            task.add_done_callback(_consume_result)
            self._inflight[key] = task
        else:
            logger.debug("Joining in-flight fetch for %s", key)
        return await asyncio.shield(task)

    async def _run(self, key: CacheKey, loader: Loader) -> ListQueryResult:
        me = asyncio.current_task()
        try:
            result = await loader()
        finally:
            owner = self._inflight.get(key) is me
            if owner:
                del self._inflight[key]
        # An invalidation while in flight detached this fetch; do not store
        # data that may predate it.
        if owner:
            self._store(key, result)
        return result

    def _store(self, key: CacheKey, result: ListQueryResult) -> None:
        self._results[key] = result
        self._results.move_to_end(key)
        if self._max_entries is not None:
            while len(self._results) > self._max_entries:
                evicted, _ = self._results.popitem(last=False)
                logger.debug("Evicted %s", evicted)

    def invalidate(self, key: CacheKey) -> None:
        """Drop *key* and detach any in-flight fetch for it."""
        self._results.pop(key, None)
        self._inflight.pop(key, None)

    def invalidate_resource(self, resource_kind: str) -> int:
        """Drop every cached page of *resource_kind*; returns the count."""
        stale = [key for key in self._results if key.resource_kind == resource_kind]
        for key in stale:
            del self._results[key]
        for key in [key for key in self._inflight if key.resource_kind == resource_kind]:
            del self._inflight[key]
        return len(stale)

    def clear(self) -> None:
        self._results.clear()
        self._inflight.clear()
