"""Public API surface for ad_common."""

from ad_common.config import parse_bool_env, parse_float_env, parse_int_env, parse_list_env
from ad_common.errors import (
    ADError,
    ConfigurationError,
    NetworkError,
    NotFoundError,
    RemoteError,
    error_to_payload,
    wrap_error,
)
from ad_common.logging import configure_logging

__all__ = [
    "ADError",
    "ConfigurationError",
    "NetworkError",
    "NotFoundError",
    "RemoteError",
    "configure_logging",
    "error_to_payload",
    "parse_bool_env",
    "parse_float_env",
    "parse_int_env",
    "parse_list_env",
    "wrap_error",
]
