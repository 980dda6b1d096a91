"""Built-in navigation fragments, one per role family."""

from __future__ import annotations

from typing import Iterable

from ad_nav.models import NavigationNode, NodeKind
from ad_nav.resolver import Forest, compose_forest
from ad_nav.roles import Role

APP_PREFIX_PATH = "/app"
ENG_PREFIX_PATH = "/eng"
DRV_PREFIX_PATH = "/drv"

_MANAGERS = (Role.SUPERADMIN, Role.ADMIN)


def _node(
    kind: NodeKind,
    key: str,
    title: str,
    roles: Iterable[Role],
    *,
    path: str = "",
    icon: str = "",
    children: Iterable[NavigationNode] = (),
) -> NavigationNode:
    return NavigationNode(
        key=key,
        path=path,
        title=title,
        translate_key=title,
        icon=icon,
        kind=kind,
        allowed_roles=frozenset(roles),
        children=tuple(children),
    )


def title(key: str, text: str, roles: Iterable[Role], children: Iterable[NavigationNode], icon: str = "") -> NavigationNode:
    return _node(NodeKind.TITLE, key, text, roles, icon=icon, children=children)


def collapse(key: str, text: str, roles: Iterable[Role], children: Iterable[NavigationNode], icon: str = "") -> NavigationNode:
    return _node(NodeKind.COLLAPSE, key, text, roles, icon=icon, children=children)


def item(key: str, text: str, path: str, roles: Iterable[Role], icon: str = "") -> NavigationNode:
    return _node(NodeKind.ITEM, key, text, roles, path=path, icon=icon)


ADMIN_FRAGMENT: Forest = (
    title(
        "apps",
        "Apps",
        (*_MANAGERS, Role.USER),
        icon="apps",
        children=(
            item("apps.dashboard", "Dashboard", f"{APP_PREFIX_PATH}/dashboard", _MANAGERS, icon="home"),
            collapse(
                "apps.projects",
                "Projects",
                _MANAGERS,
                icon="project",
                children=(
                    item("apps.projects.list", "Project List", f"{APP_PREFIX_PATH}/project-list", _MANAGERS),
                    item("apps.projects.new", "New Project", f"{APP_PREFIX_PATH}/project-new", _MANAGERS),
                ),
            ),
            item("apps.quotations", "Quotations", f"{APP_PREFIX_PATH}/quotation-list", _MANAGERS, icon="quotation"),
            item("apps.invoices", "Invoices", f"{APP_PREFIX_PATH}/invoice-list", _MANAGERS, icon="invoice"),
            item("apps.lpo", "LPO", f"{APP_PREFIX_PATH}/lpo-list", _MANAGERS, icon="lpo"),
            collapse(
                "apps.bills",
                "Bills",
                _MANAGERS,
                icon="bill",
                children=(
                    item("apps.bills.all", "All Bills", f"{APP_PREFIX_PATH}/bills", _MANAGERS),
                    item("apps.bills.categories", "Categories", f"{APP_PREFIX_PATH}/cat-list", _MANAGERS),
                    item("apps.bills.shops", "Shops", f"{APP_PREFIX_PATH}/shop-list", _MANAGERS),
                    item("apps.bills.vehicles", "Vehicles", f"{APP_PREFIX_PATH}/vehicle-list", _MANAGERS),
                ),
            ),
            collapse(
                "apps.people",
                "People",
                _MANAGERS,
                icon="users",
                children=(
                    item("apps.people.users", "Users", f"{APP_PREFIX_PATH}/user-list", (Role.SUPERADMIN,)),
                    item("apps.people.clients", "Clients", f"{APP_PREFIX_PATH}/client-list", _MANAGERS),
                ),
            ),
            item(
                "apps.attendance",
                "Attendance",
                f"{APP_PREFIX_PATH}/attendance-summary",
                (*_MANAGERS, Role.USER),
                icon="calendar",
            ),
            item("apps.expenses", "Expense Tracker", f"{APP_PREFIX_PATH}/expense-tracker", _MANAGERS, icon="wallet"),
        ),
    ),
)

ENGINEER_FRAGMENT: Forest = (
    title(
        "eng",
        "Engineer",
        (Role.ENGINEER,),
        icon="eng",
        children=(item("eng.myworks", "My works", f"{ENG_PREFIX_PATH}/myworks", (Role.ENGINEER,), icon="graph"),),
    ),
)

DRIVER_FRAGMENT: Forest = (
    title(
        "drv",
        "Driver",
        (Role.DRIVER,),
        icon="drv",
        children=(item("drv.myworks", "My works", f"{DRV_PREFIX_PATH}/soon", (Role.DRIVER,), icon="graph"),),
    ),
)

BUILTIN_FRAGMENTS: dict[str, Forest] = {
    "admin": ADMIN_FRAGMENT,
    "engineer": ENGINEER_FRAGMENT,
    "driver": DRIVER_FRAGMENT,
}


def default_forest() -> Forest:
    return compose_forest(*BUILTIN_FRAGMENTS.values())
