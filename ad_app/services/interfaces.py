"""Protocols decoupling list views from the transport."""

from __future__ import annotations

from typing import Callable, Protocol

from ad_app.models import ListQuery, ListQueryResult
from ad_app.resources import EntityId, ResourceSpec


class ListService(Protocol):
    """Remote list-fetch and delete endpoints for one or more entity kinds."""

    async def fetch(self, resource: ResourceSpec, query: ListQuery) -> ListQueryResult: ...

    async def delete(self, resource: ResourceSpec, entity_id: EntityId) -> None: ...


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


Scheduler = Callable[..., TimerHandle]
"""``scheduler(delay_seconds, callback, *args)`` returning a cancellable handle."""

__all__ = ["ListService", "Scheduler", "TimerHandle"]
