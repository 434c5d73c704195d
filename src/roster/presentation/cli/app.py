"""Roster CLI application using Typer.

This module provides command-line utilities for the Roster backend:
running the API server and managing the database schema.
"""

import asyncio

import typer
import uvicorn
from rich.console import Console

from roster.infrastructure.persistence.sqlalchemy.init_db import (
    build_engine,
    create_tables,
    describe_database_url,
    drop_tables,
)
from roster_config.settings import get_settings

app = typer.Typer(
    name="roster",
    help="Roster - user directory service CLI",
    no_args_is_help=True,
)
console = Console()


# Create db subcommand group
db_app = typer.Typer(
    name="db",
    help="Database schema utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: int | None = typer.Option(None, help="Bind port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the Roster API with uvicorn."""
    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port

    console.print(
        f"[bold green]Roster API[/bold green] listening on "
        f"[cyan]http://{host}:{port}[/cyan]"
    )
    uvicorn.run(
        "roster.presentation.api.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


async def _run_schema_action(drop: bool) -> None:
    engine = build_engine(get_settings().database_url)
    try:
        if drop:
            await drop_tables(engine)
        else:
            await create_tables(engine)
    finally:
        await engine.dispose()


@db_app.command("init")
def db_init() -> None:
    """Create missing tables. Existing tables and data are left untouched."""
    target = describe_database_url(get_settings().database_url)
    console.print(f"Initializing schema on [cyan]{target}[/cyan]...")
    asyncio.run(_run_schema_action(drop=False))
    console.print("[green]✓ Database schema is up to date[/green]")


@db_app.command("drop")
def db_drop(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Drop all Roster tables. All user data is lost."""
    target = describe_database_url(get_settings().database_url)
    if not force:
        typer.confirm(f"Drop all tables on {target}?", abort=True)

    asyncio.run(_run_schema_action(drop=True))
    console.print("[yellow]All tables dropped[/yellow]")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
