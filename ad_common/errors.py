"""Shared error taxonomy for admin-dashboard-core."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar


def _normalize_context_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return normalize_context(value)
    if isinstance(value, (list, tuple)):
        return [_normalize_context_value(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def normalize_context(context: Mapping[str, Any]) -> dict[str, Any]:
    """Return a JSON-friendly copy of an error context mapping."""
    return {key: _normalize_context_value(val) for key, val in context.items()}


class ADError(Exception):
    """Base error type for typed failure handling."""

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.context = normalize_context(context or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.error_type, "message": str(self), "context": self.context}


class NetworkError(ADError):
    """Transport failure: connection refused, DNS, timeout."""


class RemoteError(ADError):
    """Non-2xx answer or validation failure reported by the service."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        merged = dict(context or {})
        if status_code is not None:
            merged.setdefault("status_code", status_code)
        super().__init__(message, context=merged, cause=cause)
        self.status_code = status_code


class NotFoundError(RemoteError):
    """The edit/delete target no longer exists."""


class ConfigurationError(ADError):
    """Failure due to invalid configuration."""


T = TypeVar("T", bound=ADError)


def wrap_error(
    error_cls: type[T],
    message: str,
    *,
    context: Mapping[str, Any] | None = None,
    cause: Exception | None = None,
) -> T:
    """Create a typed ADError with optional context and cause."""
    return error_cls(message, context=context, cause=cause)


def error_to_payload(error: ADError) -> dict[str, Any]:
    """Convert an ADError to a display/log payload."""
    return {
        "error_type": error.error_type,
        "error": str(error),
        "error_context": error.context,
    }


__all__ = [
    "ADError",
    "ConfigurationError",
    "NetworkError",
    "NotFoundError",
    "RemoteError",
    "error_to_payload",
    "normalize_context",
    "wrap_error",
]
