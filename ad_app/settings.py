"""Dashboard settings loaded from YAML with environment overrides."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from ad_common.config import parse_float_env, parse_int_env
from ad_common.errors import ConfigurationError

CONFIG_ENV = "AD_CONFIG"

# env var -> settings field, with the parser applied to the raw string
_ENV_OVERRIDES = {
    "AD_API_URL": ("api_base_url", str),
    "AD_API_TOKEN": ("api_token", str),
    "AD_TIMEOUT": ("timeout_seconds", parse_float_env),
    "AD_DEBOUNCE_MS": ("debounce_ms", parse_int_env),
    "AD_PAGE_SIZE": ("default_page_size", parse_int_env),
    "AD_CACHE_MAX_ENTRIES": ("cache_max_entries", parse_int_env),
    "AD_NAV_FILE": ("navigation_file", str),
}


class DashboardSettings(BaseModel):
    """Runtime options for list views and the REST client."""

    api_base_url: str = Field(default="http://localhost:3000/api", description="REST API root")
    api_token: str | None = Field(default=None, description="Bearer token sent to the API")
    timeout_seconds: float = Field(default=10.0, gt=0)
    debounce_ms: int = Field(default=500, ge=0, description="Search input quiescence window")
    default_page_size: int = Field(default=10, gt=0)
    page_size_options: list[int] = Field(default_factory=lambda: [10, 25, 50, 100])
    cache_max_entries: int | None = Field(default=None, gt=0)
    navigation_file: Path | None = Field(
        default=None, description="YAML file with navigation fragments"
    )

    model_config = {"extra": "ignore"}

    @field_validator("api_base_url")
    @classmethod
    def _strip_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("page_size_options")
    @classmethod
    def _validate_options(cls, value: list[int]) -> list[int]:
        if not value or any(option <= 0 for option in value):
            raise ValueError("page_size_options must contain positive integers")
        return sorted(set(value))

    @model_validator(mode="after")
    def _default_in_options(self) -> "DashboardSettings":
        if self.default_page_size not in self.page_size_options:
            self.page_size_options = sorted({*self.page_size_options, self.default_page_size})
        return self

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000.0


def _load_config_data(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {config_path}", context={"path": config_path}
        )
    data = yaml.safe_load(config_path.read_text()) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Config file must contain a mapping at the top level.")
    section = data.get("dashboard", data)
    if not isinstance(section, dict):
        raise ConfigurationError("Config section 'dashboard' must be a mapping.")
    return dict(section)


def _env_overrides(environ: dict[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for env_name, (field_name, parser) in _ENV_OVERRIDES.items():
        raw = environ.get(env_name)
        if raw is None or raw == "":
            continue
        value = parser(raw)
        if value is None:
            raise ConfigurationError(
                f"Invalid value for {env_name}: {raw!r}", context={"env": env_name}
            )
        overrides[field_name] = value
    return overrides


def load_settings(
    path: Path | None = None, *, environ: dict[str, str] | None = None
) -> DashboardSettings:
    """Build settings from an optional YAML file plus ``AD_*`` env vars."""
    env = dict(os.environ) if environ is None else environ
    if path is None and env.get(CONFIG_ENV):
        path = Path(env[CONFIG_ENV])
    data = _load_config_data(path) if path is not None else {}
    data.update(_env_overrides(env))
    try:
        return DashboardSettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(
            "Invalid dashboard settings",
            context={"errors": [err["msg"] for err in exc.errors()]},
            cause=exc,
        ) from exc
