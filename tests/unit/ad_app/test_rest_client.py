import asyncio
import io
import json
from urllib import error
from urllib.request import Request

import pytest

from ad_app.models import ListQuery
from ad_app.resources import get_resource
from ad_app.services import rest_client as rest_mod
from ad_app.services.rest_client import RestResourceClient
from ad_app.settings import DashboardSettings
from ad_common.errors import NetworkError, NotFoundError, RemoteError

pytestmark = [pytest.mark.unit_app]


class DummyResponse:
    def __init__(self, status: int, body: str) -> None:
        self.status = status
        self._body = body

    def read(self) -> bytes:
        return self._body.encode("utf-8")

    def __enter__(self) -> "DummyResponse":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        return False


def _http_error(url: str, code: int, body: str) -> error.HTTPError:
    return error.HTTPError(url, code, "error", {}, io.BytesIO(body.encode("utf-8")))


ENVELOPE = {
    "data": {
        "categories": [{"_id": "c1", "name": "Fuel"}, {"_id": "c2", "name": "Food"}],
        "pagination": {
            "total": 42,
            "page": 2,
            "limit": 2,
            "totalPages": 21,
            "hasNextPage": True,
            "hasPreviousPage": True,
        },
    }
}


def test_base_url_requires_http_scheme() -> None:
    with pytest.raises(ValueError):
        RestResourceClient(base_url="file:///tmp/api")


def test_from_settings_copies_connection_options() -> None:
    settings = DashboardSettings(
        api_base_url="https://erp.example.com/api/", api_token="t0k", timeout_seconds=3
    )

    client = RestResourceClient.from_settings(settings)

    assert client.base_url == "https://erp.example.com/api"
    assert client.api_token == "t0k"
    assert client.timeout_seconds == 3


def test_fetch_builds_query_and_parses_envelope(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_urlopen(req: Request, timeout: float | None = None) -> DummyResponse:
        captured["url"] = req.full_url
        captured["method"] = req.get_method()
        captured["auth"] = req.get_header("Authorization")
        captured["timeout"] = timeout
        return DummyResponse(200, json.dumps(ENVELOPE))

    monkeypatch.setattr(rest_mod.request, "urlopen", fake_urlopen)
    client = RestResourceClient(base_url="http://api.local", api_token="secret", timeout_seconds=4)

    result = client.fetch_sync(
        get_resource("categories"), ListQuery(page=2, limit=2, search_text="  fu el ")
    )

    assert captured["url"] == "http://api.local/category?page=2&limit=2&search=fu+el"
    assert captured["method"] == "GET"
    assert captured["auth"] == "Bearer secret"
    assert captured["timeout"] == 4
    assert [row["_id"] for row in result.rows] == ["c1", "c2"]
    assert result.pagination.total_pages == 21
    assert result.pagination.has_previous_page is True


def test_blank_search_is_not_sent(monkeypatch: pytest.MonkeyPatch) -> None:
    urls: list[str] = []

    def fake_urlopen(req: Request, timeout: float | None = None) -> DummyResponse:
        urls.append(req.full_url)
        return DummyResponse(200, json.dumps({"data": {"shops": []}}))

    monkeypatch.setattr(rest_mod.request, "urlopen", fake_urlopen)
    client = RestResourceClient(base_url="http://api.local")

    result = client.fetch_sync(get_resource("shops"), ListQuery(search_text="   "))

    assert urls == ["http://api.local/shop?page=1&limit=10"]
    assert result.rows == ()
    assert result.pagination.total == 0
    assert result.pagination.total_pages == 1


def test_project_list_total_becomes_pagination(monkeypatch: pytest.MonkeyPatch) -> None:
    body = {"data": {"projects": [{"_id": f"p{n}"} for n in range(5)], "total": 12}}
    monkeypatch.setattr(
        rest_mod.request,
        "urlopen",
        lambda req, timeout=None: DummyResponse(200, json.dumps(body)),
    )
    client = RestResourceClient(base_url="http://api.local")

    result = client.fetch_sync(get_resource("projects"), ListQuery(page=1, limit=5))

    assert result.pagination.total == 12
    assert result.pagination.total_pages == 3
    assert result.pagination.has_next_page is True


def test_fetch_async_wrapper(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        rest_mod.request,
        "urlopen",
        lambda req, timeout=None: DummyResponse(200, json.dumps(ENVELOPE)),
    )
    client = RestResourceClient(base_url="http://api.local")

    result = asyncio.run(client.fetch(get_resource("categories"), ListQuery()))

    assert result.pagination.total == 42


def test_delete_uses_entity_path(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_urlopen(req: Request, timeout: float | None = None) -> DummyResponse:
        captured["url"] = req.full_url
        captured["method"] = req.get_method()
        return DummyResponse(200, json.dumps({"message": "Shop deleted"}))

    monkeypatch.setattr(rest_mod.request, "urlopen", fake_urlopen)
    client = RestResourceClient(base_url="http://api.local")

    asyncio.run(client.delete(get_resource("shops"), "64f/0c"))

    assert captured == {"url": "http://api.local/shop/64f%2F0c", "method": "DELETE"}


def test_not_found_maps_to_not_found_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_urlopen(req: Request, timeout: float | None = None) -> DummyResponse:
        raise _http_error(req.full_url, 404, json.dumps({"message": "Category not found"}))

    monkeypatch.setattr(rest_mod.request, "urlopen", fake_urlopen)
    client = RestResourceClient(base_url="http://api.local")

    with pytest.raises(NotFoundError) as excinfo:
        client.delete_sync(get_resource("categories"), "missing")

    assert str(excinfo.value) == "Category not found"
    assert excinfo.value.status_code == 404


def test_server_error_maps_to_remote_error(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[int] = []

    def fake_urlopen(req: Request, timeout: float | None = None) -> DummyResponse:
        calls.append(1)
        raise _http_error(req.full_url, 500, "<html>oops</html>")

    monkeypatch.setattr(rest_mod.request, "urlopen", fake_urlopen)
    client = RestResourceClient(base_url="http://api.local")

    with pytest.raises(RemoteError) as excinfo:
        client.fetch_sync(get_resource("shops"), ListQuery())

    assert not isinstance(excinfo.value, NotFoundError)
    assert str(excinfo.value) == "API error 500"
    assert excinfo.value.context["status_code"] == 500
    assert calls == [1]


def test_transport_failure_maps_to_network_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_urlopen(req: Request, timeout: float | None = None) -> DummyResponse:
        raise error.URLError("Connection refused")

    monkeypatch.setattr(rest_mod.request, "urlopen", fake_urlopen)
    client = RestResourceClient(base_url="http://api.local")

    with pytest.raises(NetworkError) as excinfo:
        client.fetch_sync(get_resource("shops"), ListQuery())

    assert "Connection refused" in str(excinfo.value)
    assert excinfo.value.context["method"] == "GET"


def test_timeout_maps_to_network_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_urlopen(req: Request, timeout: float | None = None) -> DummyResponse:
        raise TimeoutError("timed out")

    monkeypatch.setattr(rest_mod.request, "urlopen", fake_urlopen)
    client = RestResourceClient(base_url="http://api.local")

    with pytest.raises(NetworkError):
        client.fetch_sync(get_resource("shops"), ListQuery())


def test_invalid_json_is_a_remote_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        rest_mod.request, "urlopen", lambda req, timeout=None: DummyResponse(200, "not json")
    )
    client = RestResourceClient(base_url="http://api.local")

    with pytest.raises(RemoteError):
        client.fetch_sync(get_resource("shops"), ListQuery())
