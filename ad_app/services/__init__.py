"""Transport, cache and timing services used by list views."""

from ad_app.services.debounce import Debouncer
from ad_app.services.interfaces import ListService, Scheduler, TimerHandle
from ad_app.services.query_cache import CacheKey, QueryCache
from ad_app.services.rest_client import RestResourceClient

__all__ = [
    "CacheKey",
    "Debouncer",
    "ListService",
    "QueryCache",
    "RestResourceClient",
    "Scheduler",
    "TimerHandle",
]
