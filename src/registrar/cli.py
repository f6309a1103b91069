"""Command line entry point for the Registrar service."""

from __future__ import annotations

import os

import click
import uvicorn

from registrar import __version__
from registrar.config import ConfigError, Settings
from registrar.logging import setup_logging
from registrar.state_store import StateStore


def _load_settings() -> Settings:
    try:
        return Settings.from_env()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(__version__)
def main() -> None:
    """Registrar - semester registrations and offered courses."""
    pass


@main.command("init-db")
@click.option(
    "--db-path",
    default=None,
    help="SQLite database file (default: REGISTRAR_DB_PATH or registrar.db)",
)
def init_db(db_path: str | None) -> None:
    """Create the database tables if they don't exist."""
    settings = _load_settings()
    path = db_path or settings.db_path
    store = StateStore(path)
    store.close()
    click.echo(f"Database ready at {path}")


@main.command()
@click.option("--host", default=None, help="Interface to bind (default: REGISTRAR_HOST)")
@click.option("--port", type=int, default=None, help="Port to listen on (default: REGISTRAR_PORT)")
@click.option("--db-path", default=None, help="SQLite database file (default: REGISTRAR_DB_PATH)")
@click.option("--reload", is_flag=True, help="Reload on code changes (development only)")
def serve(host: str | None, port: int | None, db_path: str | None, reload: bool) -> None:
    """Serve the REST API with uvicorn."""
    settings = _load_settings()
    if db_path is not None:
        # The app factory reads the database path from the environment
        os.environ["REGISTRAR_DB_PATH"] = db_path

    setup_logging(settings)
    uvicorn.run(
        "registrar.api.app:create_app",
        factory=True,
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )
