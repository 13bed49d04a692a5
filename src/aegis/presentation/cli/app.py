"""Aegis CLI application using Typer.

This module provides command-line utilities for the Aegis backend:
secret generation, bootstrap seeding and running the API server.
"""

import asyncio
import secrets

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from aegis.infrastructure.persistence.init_db import (
    create_engine_from_settings,
    create_tables,
    run_bootstrap,
)
from aegis_config.settings import get_settings
from aegis_identity.application.seeding import SeedReport

app = typer.Typer(
    name="aegis",
    help="Aegis - role-based access control backend CLI",
    no_args_is_help=True,
)
console = Console()


# Create secrets subcommand group
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for Aegis configuration.

    Generates two required secrets:
    - JWT_SECRET_KEY: Secret for signing JWT authentication tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Aegis Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes for a strong HS256 key
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]⚠  Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


async def _seed() -> SeedReport:
    settings = get_settings()
    engine = create_engine_from_settings(settings)
    try:
        await create_tables(engine)
        session_maker = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        return await run_bootstrap(session_maker, settings)
    finally:
        await engine.dispose()


def _print_report(report: SeedReport) -> None:
    if not report.changed:
        console.print("[green]✓[/green] Reference data already present, nothing to do")
        return

    table = Table(title="Bootstrap seeding")
    table.add_column("Kind", style="cyan")
    table.add_column("Created")
    table.add_row("Permissions", ", ".join(report.created_permissions) or "-")
    table.add_row("Roles", ", ".join(report.created_roles) or "-")
    table.add_row(
        "Grants",
        ", ".join(f"{role} → {perm}" for role, perm in report.granted) or "-",
    )
    table.add_row("Admin account", "yes" if report.admin_created else "-")
    console.print(table)


@app.command("seed")
def seed() -> None:
    """Create default permissions, roles and the admin account (idempotent)."""
    report = asyncio.run(_seed())
    _print_report(report)


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: int | None = typer.Option(None, help="Port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API server with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "aegis.presentation.api.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
