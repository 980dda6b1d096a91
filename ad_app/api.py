"""Public API surface for ad_app."""

from ad_app.models import ErrorInfo, ListQuery, ListQueryResult, Pagination
from ad_app.resources import RESOURCES, EntityId, ResourceSpec, get_resource
from ad_app.services import (
    CacheKey,
    Debouncer,
    ListService,
    QueryCache,
    RestResourceClient,
    Scheduler,
)
from ad_app.settings import DashboardSettings, load_settings
from ad_app.viewmodels import (
    ListStatus,
    ListViewController,
    ListViewSnapshot,
    TaskOverviewSnapshot,
    TaskOverviewViewModel,
)
from ad_app.viewmodels.task_overview import summarize_statuses

__all__ = [
    "CacheKey",
    "DashboardSettings",
    "Debouncer",
    "EntityId",
    "ErrorInfo",
    "ListQuery",
    "ListQueryResult",
    "ListService",
    "ListStatus",
    "ListViewController",
    "ListViewSnapshot",
    "Pagination",
    "QueryCache",
    "RESOURCES",
    "ResourceSpec",
    "RestResourceClient",
    "Scheduler",
    "TaskOverviewSnapshot",
    "TaskOverviewViewModel",
    "get_resource",
    "load_settings",
    "summarize_statuses",
]
