"""Tests for shared error helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from ad_common.errors import (
    ConfigurationError,
    NetworkError,
    NotFoundError,
    RemoteError,
    error_to_payload,
    wrap_error,
)

pytestmark = pytest.mark.unit_common


def test_error_to_payload_normalizes_context() -> None:
    err = NetworkError(
        "unreachable",
        context={
            "path": Path("/tmp/test"),
            "count": 3,
            "nested": {"value": Path("nested")},
            "items": (Path("a"), "b"),
        },
    )

    payload = error_to_payload(err)

    assert payload["error_type"] == "NetworkError"
    assert payload["error"] == "unreachable"
    assert payload["error_context"]["path"].endswith("test")
    assert payload["error_context"]["count"] == 3
    assert payload["error_context"]["nested"]["value"] == "nested"
    assert payload["error_context"]["items"] == ["a", "b"]


def test_remote_error_carries_status_code() -> None:
    err = NotFoundError("gone", status_code=404, context={"path": "/shop/1"})

    assert isinstance(err, RemoteError)
    assert err.status_code == 404
    assert err.to_dict() == {
        "type": "NotFoundError",
        "message": "gone",
        "context": {"path": "/shop/1", "status_code": 404},
    }


def test_wrap_error_keeps_cause() -> None:
    cause = ValueError("bad")

    err = wrap_error(ConfigurationError, "invalid", context={"key": "x"}, cause=cause)

    assert isinstance(err, ConfigurationError)
    assert err.__cause__ is cause
    assert err.context == {"key": "x"}
