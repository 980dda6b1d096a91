"""REST client for the dashboard's list and delete endpoints."""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any
from urllib import error, parse, request

from ad_app.models import ListQuery, ListQueryResult
from ad_app.resources import EntityId, ResourceSpec
from ad_app.settings import DashboardSettings
from ad_common.errors import NetworkError, NotFoundError, RemoteError

logger = logging.getLogger(__name__)


def _validate_http_url(url: str, label: str) -> str:
    parsed = parse.urlparse(url)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValueError(f"{label} must be an http(s) URL, got: {url}")
    return url


def _parse_json(body: str) -> Any:
    if not body:
        return None
    try:
        return json.loads(body)
    except json.JSONDecodeError:
        return None


def _error_message(payload: Any, fallback: str) -> str:
    if isinstance(payload, dict):
        for key in ("message", "error", "detail"):
            value = payload.get(key)
            if isinstance(value, str) and value:
                return value
    return fallback


@dataclass
class RestResourceClient:
    """Blocking urllib transport exposed through async wrappers.

    Failures are raised as NetworkError, RemoteError or NotFoundError and
    are never retried here.
    """

    base_url: str
    api_token: str | None = None
    timeout_seconds: float = 10.0

    def __post_init__(self) -> None:
        self.base_url = _validate_http_url(self.base_url.rstrip("/"), "API base_url")

    @classmethod
    def from_settings(cls, settings: DashboardSettings) -> "RestResourceClient":
        return cls(
            base_url=settings.api_base_url,
            api_token=settings.api_token,
            timeout_seconds=settings.timeout_seconds,
        )

    async def fetch(self, resource: ResourceSpec, query: ListQuery) -> ListQueryResult:
        return await asyncio.to_thread(self.fetch_sync, resource, query)

    async def delete(self, resource: ResourceSpec, entity_id: EntityId) -> None:
        await asyncio.to_thread(self.delete_sync, resource, entity_id)

    def fetch_sync(self, resource: ResourceSpec, query: ListQuery) -> ListQueryResult:
        path = f"{resource.endpoint}?{parse.urlencode(query.to_params())}"
        payload = self._request("GET", path)
        if not isinstance(payload, dict):
            raise RemoteError(
                f"Unexpected response listing {resource.kind}",
                context={"resource": resource.kind},
            )
        return ListQueryResult.from_envelope(payload, resource.rows_key, query)

    def delete_sync(self, resource: ResourceSpec, entity_id: EntityId) -> None:
        safe_id = parse.quote(str(entity_id), safe="")
        self._request("DELETE", resource.entity_path(safe_id))
        logger.debug("DELETE %s %s succeeded", resource.kind, entity_id)

    def _request(self, method: str, path: str) -> Any:
        url = f"{self.base_url}{path}"
        headers = {"Accept": "application/json"}
        if self.api_token:
            headers["Authorization"] = f"Bearer {self.api_token}"
        context = {"method": method, "url": url}
        req = request.Request(url, headers=headers, method=method)
        try:
            with request.urlopen(  # nosec B310
                req, timeout=self.timeout_seconds
            ) as resp:
                status = resp.status
                body = resp.read().decode("utf-8") if resp is not None else ""
        except error.HTTPError as exc:
            body = exc.read().decode("utf-8") if exc.fp else ""
            message = _error_message(_parse_json(body), f"API error {exc.code}")
            error_cls = NotFoundError if exc.code == 404 else RemoteError
            raise error_cls(message, status_code=exc.code, context=context, cause=exc) from exc
        except error.URLError as exc:
            raise NetworkError(
                f"API request failed: {exc.reason}", context=context, cause=exc
            ) from exc
        except (TimeoutError, OSError) as exc:
            raise NetworkError(f"API request failed: {exc}", context=context, cause=exc) from exc

        if not 200 <= status < 300:
            message = _error_message(_parse_json(body), f"API error {status}")
            error_cls = NotFoundError if status == 404 else RemoteError
            raise error_cls(message, status_code=status, context=context)
        parsed = _parse_json(body)
        if body and parsed is None:
            raise RemoteError("API returned invalid JSON", status_code=status, context=context)
        return parsed
