from __future__ import annotations

import logging

import pytest

from ad_common.errors import ConfigurationError
from ad_nav.fragments import ENGINEER_FRAGMENT, default_forest
from ad_nav.roles import Role, parse_roles
from ad_nav.session import NavigationSession

pytestmark = pytest.mark.unit_nav


def test_initial_menu_is_resolved() -> None:
    session = NavigationSession(default_forest(), ["engineer"])

    assert session.roles == {Role.ENGINEER}
    assert [node.key for node in session.menu] == ["eng"]


def test_no_roles_means_empty_menu() -> None:
    assert NavigationSession(default_forest()).menu == ()


def test_role_change_notifies_listeners() -> None:
    session = NavigationSession(default_forest())
    seen = []
    session.add_listener(seen.append)

    assert session.set_roles(["Driver"]) is True
    assert session.set_roles([Role.DRIVER]) is False

    assert len(seen) == 1
    assert [node.key for node in seen[0]] == ["drv"]


def test_removed_listener_is_not_called() -> None:
    session = NavigationSession(default_forest())
    seen = []
    session.add_listener(seen.append)
    session.remove_listener(seen.append)

    session.set_roles(["admin"])

    assert seen == []


def test_set_forest_re_resolves() -> None:
    session = NavigationSession(default_forest(), ["engineer"])

    session.set_forest(ENGINEER_FRAGMENT + ENGINEER_FRAGMENT)

    assert [node.key for node in session.menu] == ["eng", "eng"]


def test_listener_failure_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    session = NavigationSession(default_forest())
    seen = []

    def broken(menu):
        raise RuntimeError("boom")

    session.add_listener(broken)
    session.add_listener(seen.append)

    with caplog.at_level(logging.ERROR):
        session.set_roles(["user"])

    assert len(seen) == 1
    assert "Navigation listener failed" in caplog.text


def test_parse_roles() -> None:
    assert parse_roles(None) == frozenset()
    assert parse_roles([" ADMIN ", "user"]) == {Role.ADMIN, Role.USER}
    with pytest.raises(ConfigurationError, match="Unknown role"):
        parse_roles(["root"])
