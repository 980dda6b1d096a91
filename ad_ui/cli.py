"""
Command-line interface for admin-dashboard-core.

Shows role-gated menus and drives list views against the dashboard REST API.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ad_common.api import configure_logging
from ad_ui.commands.nav import register_nav_command
from ad_ui.commands.records import register_record_commands
from ad_ui.context import UIContext

ctx_store = UIContext()

app = typer.Typer(help="Inspect dashboard menus and remote list views.", no_args_is_help=True)


@app.callback()
def entry(
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML settings file (overrides AD_CONFIG).",
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """Global options shared by every command."""
    configure_logging(debug=debug, force=True)
    if config is not None:
        ctx_store.use_config(config)


register_nav_command(app, ctx_store)
register_record_commands(app, ctx_store)


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
