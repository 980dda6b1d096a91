"""Controller for paginated, searchable remote list screens (UI-agnostic)."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from ad_app.models import ErrorInfo, ListQuery, ListQueryResult
from ad_app.resources import EntityId, ResourceSpec
from ad_app.services.debounce import Debouncer
from ad_app.services.interfaces import ListService, Scheduler
from ad_app.services.query_cache import CacheKey, QueryCache
from ad_app.settings import DashboardSettings
from ad_app.viewmodels.list_state import ListStateMachine, ListStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListViewSnapshot:
    resource_kind: str
    query: ListQuery
    status: ListStatus
    last_result: ListQueryResult | None
    last_error: ErrorInfo | None
    pending_delete: EntityId | None
    delete_dialog_open: bool
    delete_error: ErrorInfo | None


class ListViewController:
    """Own the query, load status and delete dialog of one list screen.

    Every change of the effective query (page, limit, search text) starts a
    load tagged with a generation number; only the load of the newest query
    may update state, and nothing is updated once the view is unmounted.
    Errors are captured as ErrorInfo and never raised to the caller.

    Loads are scheduled on the running asyncio loop, so ``mount`` and the
    query setters must be called from inside it.
    """

    def __init__(
        self,
        resource: ResourceSpec,
        service: ListService,
        *,
        cache: QueryCache | None = None,
        settings: DashboardSettings | None = None,
        scheduler: Scheduler | None = None,
        query: ListQuery | None = None,
    ) -> None:
        self._settings = settings or DashboardSettings()
        self._resource = resource
        self._service = service
        self._cache = cache if cache is not None else QueryCache(self._settings.cache_max_entries)
        self._query = query or ListQuery(limit=self._settings.default_page_size)
        self._debouncer: Debouncer[str] = Debouncer(
            self._settings.debounce_seconds, self._apply_search, scheduler=scheduler
        )
        self._state = ListStateMachine()

        self._last_result: ListQueryResult | None = None
        self._last_error: ErrorInfo | None = None
        self._pending_delete: EntityId | None = None
        self._delete_dialog_open = False
        self._delete_error: ErrorInfo | None = None
        self._deleting = False

        self._mounted = False
        self._generation = 0
        self._load_task: asyncio.Task[None] | None = None
        self._tasks: set[asyncio.Task[None]] = set()

    # -- state -------------------------------------------------------------

    @property
    def resource(self) -> ResourceSpec:
        return self._resource

    @property
    def query(self) -> ListQuery:
        return self._query

    @property
    def status(self) -> ListStatus:
        return self._state.state

    @property
    def state_machine(self) -> ListStateMachine:
        return self._state

    @property
    def last_result(self) -> ListQueryResult | None:
        return self._last_result

    @property
    def last_error(self) -> ErrorInfo | None:
        return self._last_error

    @property
    def pending_delete(self) -> EntityId | None:
        return self._pending_delete

    @property
    def delete_dialog_open(self) -> bool:
        return self._delete_dialog_open

    @property
    def delete_error(self) -> ErrorInfo | None:
        return self._delete_error

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    @property
    def search_pending(self) -> bool:
        return self._debouncer.pending

    @property
    def page_size_options(self) -> list[int]:
        return list(self._settings.page_size_options)

    def snapshot(self) -> ListViewSnapshot:
        return ListViewSnapshot(
            resource_kind=self._resource.kind,
            query=self._query,
            status=self.status,
            last_result=self._last_result,
            last_error=self._last_error,
            pending_delete=self._pending_delete,
            delete_dialog_open=self._delete_dialog_open,
            delete_error=self._delete_error,
        )

    # -- lifecycle ---------------------------------------------------------

    def mount(self) -> None:
        """Start the first fetch; calling it twice is a no-op."""
        if self._mounted:
            return
        self._mounted = True
        self._start_load()

    def unmount(self) -> None:
        """Drop interest in pending timers and fetches owned by this view."""
        self._mounted = False
        self._generation += 1
        self._debouncer.cancel()
        for task in list(self._tasks):
            task.cancel()
        self._tasks.clear()
        self._load_task = None

    async def wait_idle(self) -> None:
        """Wait until the newest load has finished."""
        while True:
            task = self._load_task
            if task is None or task.done():
                return
            await asyncio.wait({task})

    # -- query changes -----------------------------------------------------

    def set_search_text(self, raw: str) -> None:
        self._debouncer.call(raw)

    def flush_search(self) -> bool:
        """Apply a pending search immediately (e.g. on Enter)."""
        return self._debouncer.flush()

    def set_page(self, page: int) -> None:
        self._set_query(self._query.with_page(page))

    def set_page_size(self, limit: int) -> None:
        self._set_query(self._query.with_limit(limit))

    def retry(self) -> None:
        """Re-issue the current query, bypassing the cache.

        A fetch already running for the query is joined, not duplicated.
        """
        key = self._cache_key(self._query)
        if self._cache.is_inflight(key):
            if self._load_task is not None and not self._load_task.done():
                return
        else:
            self._cache.invalidate(key)
        if self._mounted:
            self._start_load()

    def _apply_search(self, raw: str) -> None:
        self._set_query(self._query.with_search(raw))

    def _set_query(self, query: ListQuery) -> None:
        if query == self._query:
            return
        self._query = query
        if self._mounted:
            self._start_load()

    # -- loading -----------------------------------------------------------

    def _cache_key(self, query: ListQuery) -> CacheKey:
        return CacheKey.for_query(self._resource.kind, query)

    def _start_load(self) -> None:
        self._generation += 1
        generation = self._generation
        query = self._query
        key = self._cache_key(query)

        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Serving %s from cache", key)
            self._load_task = None
            self._apply_result(cached)
            return

        self._state.transition(ListStatus.LOADING, reason=f"page {query.page}")
        task = asyncio.get_running_loop().create_task(self._load(generation, query, key))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        self._load_task = task

    def _is_current(self, generation: int) -> bool:
        return self._mounted and generation == self._generation

    async def _load(self, generation: int, query: ListQuery, key: CacheKey) -> None:
        try:
            result = await self._cache.fetch(
                key, lambda: self._service.fetch(self._resource, query)
            )
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            if not self._is_current(generation):
                logger.debug("Discarding failure of superseded query %s", key)
                return
            self._last_error = ErrorInfo.from_exception(exc)
            self._state.transition(ListStatus.ERROR, reason=self._last_error.message)
            logger.warning(
                "Failed to load %s: %s", self._resource.kind, self._last_error.message
            )
            return
        if not self._is_current(generation):
            logger.debug("Discarding result of superseded query %s", key)
            return
        self._apply_result(result)

    def _apply_result(self, result: ListQueryResult) -> None:
        self._last_result = result
        self._last_error = None
        self._state.transition(ListStatus.SUCCESS)

    # -- delete flow -------------------------------------------------------

    def request_delete(self, entity_id: EntityId) -> None:
        self._pending_delete = entity_id
        self._delete_dialog_open = True
        self._delete_error = None

    def cancel_delete(self) -> None:
        self._pending_delete = None
        self._delete_dialog_open = False
        self._delete_error = None

    async def confirm_delete(self) -> bool:
        """Delete the pending entity; returns True on success.

        Rows are never removed locally: a successful delete invalidates the
        resource's cached pages and re-fetches the current query, keeping the
        current page even if it is now empty.
        """
        entity_id = self._pending_delete
        if entity_id is None or not self._delete_dialog_open:
            logger.debug("confirm_delete called with no pending delete")
            return False
        if self._deleting:
            return False

        self._deleting = True
        self._delete_error = None
        try:
            await self._service.delete(self._resource, entity_id)
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            info = ErrorInfo.from_exception(exc)
            logger.warning(
                "Failed to delete %s %s: %s", self._resource.kind, entity_id, info.message
            )
            if self._mounted and self._pending_delete == entity_id:
                self._delete_error = info
            return False
        finally:
            self._deleting = False

        logger.info("Deleted %s %s", self._resource.kind, entity_id)
        self._cache.invalidate_resource(self._resource.kind)
        if not self._mounted:
            return True
        if self._pending_delete == entity_id:
            self._pending_delete = None
            self._delete_dialog_open = False
        self._start_load()
        return True

    # -- routing -----------------------------------------------------------

    def create_path(self) -> str | None:
        return self._resource.create_path

    def edit_path(self, entity_id: EntityId) -> str | None:
        return self._resource.build_edit_path(entity_id)

    def detail_path(self, entity_id: EntityId) -> str | None:
        return self._resource.build_detail_path(entity_id)
