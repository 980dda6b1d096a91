"""User role tags used for menu authorization."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from ad_common.errors import ConfigurationError


class Role(str, Enum):
    """User categories recognised by the dashboard."""

    SUPERADMIN = "superadmin"
    ADMIN = "admin"
    USER = "user"
    ENGINEER = "engineer"
    DRIVER = "driver"


RoleSet = frozenset[Role]


def parse_role(value: str | Role) -> Role:
    """Return the Role matching *value* (case-insensitive)."""
    if isinstance(value, Role):
        return value
    try:
        return Role(str(value).strip().lower())
    except ValueError as exc:
        raise ConfigurationError(
            f"Unknown role: {value!r}",
            context={"known": [role.value for role in Role]},
            cause=exc,
        ) from exc


def parse_roles(values: Iterable[str | Role] | None) -> RoleSet:
    """Convert role names to a role set; None or empty yields an empty set."""
    if not values:
        return frozenset()
    return frozenset(parse_role(value) for value in values)
