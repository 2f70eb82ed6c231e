"""CLI commands to run the HTTP API and prepare the database."""

from __future__ import annotations

import click
import uvicorn

from ims.domain.exceptions import DomainException
from ims.infrastructure import bootstrap


@click.command("serve")
@click.option("--host", default=None, help="Bind address (default: $HOST or 0.0.0.0).")
@click.option("--port", default=None, type=int, help="Port (default: $PORT or 3000).")
@click.option("--reload", is_flag=True, default=False, help="Reload on code changes.")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Run the inventory HTTP API."""
    settings = bootstrap.settings()
    uvicorn.run(
        "ims.infrastructure.api.app:create_app",
        factory=True,
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@click.command("init-db")
def init_db() -> None:
    """Create the collections' indexes (unique SKU and supplier email)."""
    try:
        bootstrap.init_database()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Indexes ensured on database '{bootstrap.settings().mongodb_database}'.")
