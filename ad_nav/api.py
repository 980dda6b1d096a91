"""Public API surface for ad_nav."""

from ad_nav.fragments import (
    ADMIN_FRAGMENT,
    BUILTIN_FRAGMENTS,
    DRIVER_FRAGMENT,
    ENGINEER_FRAGMENT,
    default_forest,
)
from ad_nav.loader import load_forest, load_fragments
from ad_nav.models import NavigationNode, NodeKind, iter_nodes
from ad_nav.resolver import Forest, compose_forest, resolve, resolve_forest
from ad_nav.roles import Role, RoleSet, parse_role, parse_roles
from ad_nav.session import NavigationSession

__all__ = [
    "ADMIN_FRAGMENT",
    "BUILTIN_FRAGMENTS",
    "DRIVER_FRAGMENT",
    "ENGINEER_FRAGMENT",
    "Forest",
    "NavigationNode",
    "NavigationSession",
    "NodeKind",
    "Role",
    "RoleSet",
    "compose_forest",
    "default_forest",
    "iter_nodes",
    "load_forest",
    "load_fragments",
    "parse_role",
    "parse_roles",
    "resolve",
    "resolve_forest",
]
