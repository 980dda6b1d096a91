"""Role/session provider that keeps the visible menu in sync with roles."""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from ad_nav.models import NavigationNode
from ad_nav.resolver import Forest, resolve_forest
from ad_nav.roles import Role, RoleSet, parse_roles

logger = logging.getLogger(__name__)

MenuListener = Callable[[Forest], None]


class NavigationSession:
    """Hold the current user's roles and the menu resolved for them."""

    def __init__(
        self,
        forest: Iterable[NavigationNode],
        roles: Iterable[str | Role] | None = None,
    ) -> None:
        self._forest: Forest = tuple(forest)
        self._roles: RoleSet = parse_roles(roles)
        self._menu: Forest = resolve_forest(self._forest, self._roles)
        self._listeners: list[MenuListener] = []

    @property
    def roles(self) -> RoleSet:
        return self._roles

    @property
    def forest(self) -> Forest:
        return self._forest

    @property
    def menu(self) -> Forest:
        return self._menu

    def add_listener(self, callback: MenuListener) -> None:
        if callback not in self._listeners:
            self._listeners.append(callback)

    def remove_listener(self, callback: MenuListener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def set_roles(self, roles: Iterable[str | Role] | None) -> bool:
        """Switch to *roles*; returns True when the role set changed."""
        new_roles = parse_roles(roles)
        if new_roles == self._roles:
            return False
        self._roles = new_roles
        self._refresh()
        return True

    def set_forest(self, forest: Iterable[NavigationNode]) -> None:
        """Replace the navigation configuration and re-resolve."""
        self._forest = tuple(forest)
        self._refresh()

    def _refresh(self) -> None:
        self._menu = resolve_forest(self._forest, self._roles)
        logger.debug(
            "Navigation resolved for roles %s: %d root entries",
            sorted(role.value for role in self._roles),
            len(self._menu),
        )
        for listener in list(self._listeners):
            try:
                listener(self._menu)
            except Exception:
                logger.exception("Navigation listener failed")
