"""Application layer: list views, REST client and settings."""

from ad_app.api import ListQuery, ListViewController, QueryCache, RestResourceClient

__all__ = ["ListQuery", "ListViewController", "QueryCache", "RestResourceClient"]
