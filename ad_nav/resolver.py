"""Role-based filtering of navigation trees."""

from __future__ import annotations

from typing import Iterable

from ad_nav.models import NavigationNode
from ad_nav.roles import Role

Forest = tuple[NavigationNode, ...]


def resolve(node: NavigationNode, roles: Iterable[Role]) -> NavigationNode | None:
    """Return the part of *node* visible to *roles*, or None.

    Children are filtered first. A node survives only when its own
    ``allowed_roles`` intersect *roles*; titles and collapses additionally
    need at least one surviving child. Sibling order is kept.
    """
    role_set = frozenset(roles)
    if not role_set:
        return None
    return _resolve(node, role_set)


def _resolve(node: NavigationNode, roles: frozenset[Role]) -> NavigationNode | None:
    children = tuple(
        resolved
        for resolved in (_resolve(child, roles) for child in node.children)
        if resolved is not None
    )
    if not node.is_visible_to(roles):
        return None
    if node.is_categorical and not children:
        return None
    if children == node.children:
        return node
    return node.model_copy(update={"children": children})


def resolve_forest(forest: Iterable[NavigationNode], roles: Iterable[Role]) -> Forest:
    """Resolve every root of *forest*, dropping the ones that vanish."""
    role_set = frozenset(roles)
    if not role_set:
        return ()
    resolved = (_resolve(node, role_set) for node in forest)
    return tuple(node for node in resolved if node is not None)


def compose_forest(*fragments: Iterable[NavigationNode]) -> Forest:
    """Concatenate per-role fragments into one forest.

    Keys repeated across fragments are kept as-is.
    """
    return tuple(node for fragment in fragments for node in fragment)
