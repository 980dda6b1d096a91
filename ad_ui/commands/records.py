from __future__ import annotations

import asyncio
from typing import Optional

import typer

from ad_app.api import (
    RESOURCES,
    ListQuery,
    ListStatus,
    ListViewController,
    ListViewSnapshot,
    get_resource,
)
from ad_common.errors import ConfigurationError
from ad_ui.context import UIContext
from ad_ui.render import pagination_line, resources_table, result_table


async def _load_page(controller: ListViewController) -> ListViewSnapshot:
    controller.mount()
    try:
        await controller.wait_idle()
        return controller.snapshot()
    finally:
        controller.unmount()


async def _delete(controller: ListViewController, entity_id: str) -> ListViewSnapshot:
    controller.mount()
    try:
        await controller.wait_idle()
        controller.request_delete(entity_id)
        await controller.confirm_delete()
        await controller.wait_idle()
        return controller.snapshot()
    finally:
        controller.unmount()


def register_record_commands(app: typer.Typer, ctx: UIContext) -> None:
    """Register ``resources``, ``list`` and ``delete``."""

    def _controller(
        kind: str, *, page: int = 1, limit: Optional[int] = None, search: str = ""
    ) -> ListViewController:
        try:
            resource = get_resource(kind)
            settings = ctx.settings
            query = ListQuery(
                page=page, limit=limit or settings.default_page_size, search_text=search
            )
            return ListViewController(resource, ctx.service, settings=settings, query=query)
        except ConfigurationError as exc:
            ctx.console.print(f"[red]{exc}[/red]")
            raise typer.Exit(1)

    @app.command("resources")
    def resources() -> None:
        """List the resource kinds that have list screens."""
        ctx.console.print(resources_table(RESOURCES.values()))

    @app.command("list")
    def list_records(
        resource: str = typer.Argument(..., help="Resource kind, e.g. categories or shops."),
        page: int = typer.Option(1, "--page", "-p", min=1, help="Page number."),
        limit: Optional[int] = typer.Option(None, "--limit", "-l", min=1, help="Rows per page."),
        search: str = typer.Option("", "--search", "-s", help="Search text."),
    ) -> None:
        """Fetch and print one page of a resource."""
        controller = _controller(resource, page=page, limit=limit, search=search)
        snapshot = asyncio.run(_load_page(controller))
        if snapshot.status is ListStatus.ERROR and snapshot.last_error is not None:
            ctx.console.print(
                f"[red]Error loading {resource}:[/red] {snapshot.last_error.message}"
            )
            raise typer.Exit(1)
        result = snapshot.last_result
        if result is None:
            ctx.console.print(f"[yellow]No data returned for {resource}[/yellow]")
            raise typer.Exit(1)
        spec = get_resource(resource)
        if result.rows:
            ctx.console.print(result_table(spec, result))
        else:
            ctx.console.print(f"[yellow]No {spec.label or resource} found[/yellow]")
        ctx.console.print(pagination_line(result))

    @app.command("delete")
    def delete_record(
        resource: str = typer.Argument(..., help="Resource kind, e.g. categories or shops."),
        entity_id: str = typer.Argument(..., help="Identifier of the record to delete."),
        yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt."),
    ) -> None:
        """Delete one record after confirmation."""
        controller = _controller(resource)
        if not yes and not typer.confirm(f"Delete {resource} {entity_id}?"):
            ctx.console.print("Cancelled.")
            raise typer.Exit(0)
        snapshot = asyncio.run(_delete(controller, entity_id))
        if snapshot.delete_dialog_open:
            message = snapshot.delete_error.message if snapshot.delete_error else "unknown error"
            ctx.console.print(f"[red]Failed to delete {resource} {entity_id}:[/red] {message}")
            raise typer.Exit(1)
        ctx.console.print(f"[green]Deleted {resource} {entity_id}[/green]")
        if snapshot.last_result is not None:
            ctx.console.print(pagination_line(snapshot.last_result))
