"""Shared helpers for admin-dashboard-core."""

from ad_common.api import ADError, configure_logging

__all__ = ["ADError", "configure_logging"]
