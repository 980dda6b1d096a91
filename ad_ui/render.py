"""Rich renderables for menus and list pages."""

from __future__ import annotations

from typing import Any, Iterable

from rich.table import Table
from rich.tree import Tree

from ad_app.api import ListQueryResult, ResourceSpec
from ad_nav.api import NavigationNode, NodeKind

_HIDDEN_COLUMNS = {"__v"}
_MAX_COLUMNS = 6
_KIND_STYLES = {
    NodeKind.TITLE: "bold magenta",
    NodeKind.COLLAPSE: "bold cyan",
    NodeKind.ITEM: "",
}


def _node_label(node: NavigationNode) -> str:
    style = _KIND_STYLES[node.kind]
    label = f"[{style}]{node.title}[/]" if style else node.title
    if node.path:
        label += f" [dim]{node.path}[/dim]"
    return label


def _add_children(branch: Tree, nodes: Iterable[NavigationNode]) -> None:
    for node in nodes:
        child = branch.add(_node_label(node))
        _add_children(child, node.children)


def menu_tree(menu: Iterable[NavigationNode], title: str = "Menu") -> Tree:
    tree = Tree(f"[bold]{title}[/bold]")
    _add_children(tree, menu)
    return tree


def _columns_for(rows: Iterable[dict[str, Any]]) -> list[str]:
    columns: list[str] = []
    for row in rows:
        for key in row:
            if key in _HIDDEN_COLUMNS or key in columns:
                continue
            columns.append(key)
    return columns[:_MAX_COLUMNS]


def _cell(value: Any) -> str:
    if value is None or value == "":
        return "-"
    if isinstance(value, (list, tuple)):
        return ", ".join(_cell(item) for item in value)
    if isinstance(value, dict):
        return str(value.get("name") or value.get("_id") or value)
    return str(value)


def result_table(resource: ResourceSpec, result: ListQueryResult) -> Table:
    table = Table(title=resource.label or resource.kind, show_header=True, header_style="bold")
    columns = _columns_for(result.rows)
    for column in columns:
        table.add_column(column)
    for row in result.rows:
        table.add_row(*[_cell(row.get(column)) for column in columns])
    return table


def pagination_line(result: ListQueryResult) -> str:
    page = result.pagination
    parts = [f"Page {page.page} of {max(page.total_pages, 1)}", f"{page.total} total"]
    if page.has_previous_page:
        parts.append("previous available")
    if page.has_next_page:
        parts.append("next available")
    return " · ".join(parts)


def resources_table(resources: Iterable[ResourceSpec]) -> Table:
    table = Table(title="Resources", show_header=True, header_style="bold")
    for column in ("Kind", "Endpoint", "Create", "Edit", "Detail"):
        table.add_column(column)
    for spec in resources:
        table.add_row(
            spec.kind,
            spec.endpoint,
            spec.create_path or "-",
            spec.edit_path or "-",
            spec.detail_path or "-",
        )
    return table
