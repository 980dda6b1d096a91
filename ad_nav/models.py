"""Navigation tree node model."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Iterator

from pydantic import BaseModel, Field, field_validator

from ad_nav.roles import Role, RoleSet


class NodeKind(str, Enum):
    """Menu entry kinds; titles and collapses only group other entries."""

    TITLE = "title"
    COLLAPSE = "collapse"
    ITEM = "item"


_CATEGORICAL_KINDS = {NodeKind.TITLE, NodeKind.COLLAPSE}


class NavigationNode(BaseModel):
    """One entry of the role-gated side menu.

    Field aliases follow the navigation config files (``type``,
    ``authority``, ``subMenu``, ``translateKey``) so the same model
    validates YAML fragments and nodes declared in code.
    """

    key: str = Field(min_length=1)
    path: str = ""
    title: str
    translate_key: str | None = Field(default=None, alias="translateKey")
    icon: str = ""
    kind: NodeKind = Field(default=NodeKind.ITEM, alias="type")
    allowed_roles: frozenset[Role] = Field(default_factory=frozenset, alias="authority")
    children: tuple["NavigationNode", ...] = Field(default=(), alias="subMenu")

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}

    @field_validator("kind", mode="before")
    @classmethod
    def _normalize_kind(cls, value: Any) -> Any:
        if isinstance(value, str):
            normalized = value.strip().lower()
            # config files use the NAV_ITEM_TYPE_* constant names
            return normalized.removeprefix("nav_item_type_")
        return value

    @field_validator("allowed_roles", mode="before")
    @classmethod
    def _normalize_roles(cls, value: Any) -> Any:
        if value is None:
            return frozenset()
        if isinstance(value, str):
            value = [value]
        return frozenset(
            item.strip().lower() if isinstance(item, str) else item for item in value
        )

    @property
    def is_categorical(self) -> bool:
        return self.kind in _CATEGORICAL_KINDS

    def is_visible_to(self, roles: RoleSet) -> bool:
        return bool(self.allowed_roles & roles)


def iter_nodes(forest: Iterable[NavigationNode]) -> Iterator[NavigationNode]:
    """Yield every node of *forest* in pre-order."""
    for node in forest:
        yield node
        yield from iter_nodes(node.children)
