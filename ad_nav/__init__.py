"""Role-gated navigation menus."""

from ad_nav.api import NavigationNode, NavigationSession, Role, resolve, resolve_forest

__all__ = ["NavigationNode", "NavigationSession", "Role", "resolve", "resolve_forest"]
