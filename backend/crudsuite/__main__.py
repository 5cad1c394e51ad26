"""CLI for running the crudsuite apps.

Usage:
    python -m crudsuite list                        # Show apps and their databases
    python -m crudsuite serve inventory             # Serve one app on the configured port
    python -m crudsuite serve projects --port 5001  # Override host/port
"""

from __future__ import annotations

from typing import Optional

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from crudsuite import APP_KEYS
from crudsuite.config import settings
from crudsuite.main import APP_TITLES

app = typer.Typer(
    name="crudsuite",
    help="Inventory, project tracker and storefront apps over MongoDB",
    no_args_is_help=True,
)
console = Console(stderr=True)


@app.command("list")
def cmd_list() -> None:
    """Show available apps."""
    table = Table(title="Available Apps", show_header=True, header_style="bold")
    table.add_column("Key", style="green", min_width=12)
    table.add_column("Title", min_width=24)
    table.add_column("Database")
    table.add_column("ASGI target")

    for key in APP_KEYS:
        table.add_row(key, APP_TITLES[key], settings.database_for(key), f"crudsuite.apps.{key}:app")

    console.print()
    console.print(table)
    console.print()


@app.command("serve")
def cmd_serve(
    app_key: str = typer.Argument(help="App to serve: inventory, projects or storefront"),
    host: Optional[str] = typer.Option(None, "--host", help="Bind address (default: BACKEND_HOST)"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port (default: BACKEND_PORT)"),
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes"),
) -> None:
    """Run one app under uvicorn."""
    if app_key not in APP_KEYS:
        console.print(f"[red]Unknown app: {app_key}[/red]. Choose: {', '.join(APP_KEYS)}")
        raise typer.Exit(1)

    bind_host = host or settings.backend_host
    bind_port = port or settings.backend_port
    console.print(f"[bold]{APP_TITLES[app_key]}[/bold] running at http://{bind_host}:{bind_port}")
    uvicorn.run(
        f"crudsuite.apps.{app_key}:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    app()
