from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from ad_common.errors import ConfigurationError
from ad_nav.api import NavigationSession, default_forest, load_forest
from ad_ui.context import UIContext
from ad_ui.render import menu_tree


def register_nav_command(app: typer.Typer, ctx: UIContext) -> None:
    """Register ``nav``: print the menu visible to a role set."""

    @app.command("nav")
    def nav(
        role: List[str] = typer.Option(
            ...,
            "--role",
            "-r",
            help="Role of the current user (repeatable).",
        ),
        nav_file: Optional[Path] = typer.Option(
            None,
            "--nav-file",
            help="YAML file with navigation fragments (defaults to the built-in menu).",
        ),
    ) -> None:
        """Show the navigation menu resolved for the given roles."""
        try:
            source = nav_file or ctx.settings.navigation_file
            forest = load_forest(source) if source else default_forest()
            session = NavigationSession(forest, role)
        except ConfigurationError as exc:
            ctx.console.print(f"[red]{exc}[/red]")
            raise typer.Exit(1)
        if not session.menu:
            ctx.console.print(f"[yellow]No menu entries visible for roles: {', '.join(role)}[/yellow]")
            return
        label = ", ".join(sorted(r.value for r in session.roles))
        ctx.console.print(menu_tree(session.menu, title=f"Menu ({label})"))
