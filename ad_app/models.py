"""Value types shared by list views and the REST client."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Any, Mapping

from pydantic import BaseModel, Field

from ad_common.errors import ADError, normalize_context

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class ListQuery:
    """Parameters identifying one page of a searchable remote collection."""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    search_text: str = ""

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")
        if self.limit <= 0:
            raise ValueError(f"limit must be > 0, got {self.limit}")

    def with_page(self, page: int) -> "ListQuery":
        return replace(self, page=page)

    def with_limit(self, limit: int) -> "ListQuery":
        return replace(self, page=DEFAULT_PAGE, limit=limit)

    def with_search(self, search_text: str) -> "ListQuery":
        return replace(self, page=DEFAULT_PAGE, search_text=search_text)

    def to_params(self) -> dict[str, str]:
        """Query-string parameters; blank searches are omitted."""
        params = {"page": str(self.page), "limit": str(self.limit)}
        search = self.search_text.strip()
        if search:
            params["search"] = search
        return params


class Pagination(BaseModel):
    """Pagination block returned next to the rows of a list response."""

    total: int = Field(default=0, ge=0)
    page: int = Field(default=DEFAULT_PAGE, ge=1)
    limit: int = Field(default=DEFAULT_LIMIT, gt=0)
    total_pages: int = Field(default=1, ge=0, alias="totalPages")
    has_next_page: bool = Field(default=False, alias="hasNextPage")
    has_previous_page: bool = Field(default=False, alias="hasPreviousPage")

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}


class ListQueryResult(BaseModel):
    """Rows of one page plus its pagination metadata.

    Rows are opaque records owned by the remote service.
    """

    rows: tuple[dict[str, Any], ...] = ()
    pagination: Pagination = Field(default_factory=Pagination)

    model_config = {"frozen": True, "extra": "ignore"}

    @classmethod
    def from_envelope(
        cls,
        payload: Mapping[str, Any],
        rows_key: str,
        query: ListQuery | None = None,
    ) -> "ListQueryResult":
        """Parse ``{"data": {<rows_key>: [...], "pagination": {...}}}``.

        Endpoints that answer with a bare ``data.total`` instead of a
        pagination block get one derived from it and *query*.
        """
        data = payload.get("data") if isinstance(payload, Mapping) else None
        if not isinstance(data, Mapping):
            data = {}
        rows = data.get(rows_key) or []
        pagination = data.get("pagination") or {}
        total = data.get("total")
        if not pagination and isinstance(total, int) and not isinstance(total, bool):
            pagination = _pagination_from_total(total, query or ListQuery())
        return cls.model_validate({"rows": rows, "pagination": pagination})


def _pagination_from_total(total: int, query: ListQuery) -> dict[str, Any]:
    total = max(total, 0)
    total_pages = max(math.ceil(total / query.limit), 1)
    return {
        "total": total,
        "page": query.page,
        "limit": query.limit,
        "totalPages": total_pages,
        "hasNextPage": query.page < total_pages,
        "hasPreviousPage": query.page > 1,
    }


@dataclass(frozen=True)
class ErrorInfo:
    """Displayable description of a failed fetch or delete."""

    error_type: str
    message: str
    context: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: BaseException) -> "ErrorInfo":
        if isinstance(exc, ADError):
            return cls(error_type=exc.error_type, message=str(exc), context=dict(exc.context))
        context = normalize_context(getattr(exc, "context", None) or {})
        return cls(
            error_type=exc.__class__.__name__,
            message=str(exc) or exc.__class__.__name__,
            context=context,
        )
