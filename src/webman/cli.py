"""Command-line interface for Webman.

This module provides the CLI commands for running and managing
the Webman backend.
"""

import asyncio
from typing import NoReturn

import click

from webman.core.config import get_settings
from webman.core.logging import configure_logging, get_logger


@click.group()
@click.version_option(version="0.1.0", prog_name="Webman")
def cli() -> None:
    """Webman - saved HTTP request collections and a passthrough proxy.

    Settings are loaded from WEBMAN_* environment variables and .env.
    """


@cli.command()
@click.option(
    "--host",
    type=str,
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--workers",
    type=int,
    default=None,
    help="Number of worker processes (overrides config)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
def serve(host: str | None, port: int | None, workers: int | None, reload: bool) -> None:
    """Start the Webman server.

    By default, the server listens on 0.0.0.0:9090.
    """
    import uvicorn

    settings = get_settings()

    bind_host = host or settings.host
    bind_port = port or settings.port
    bind_workers = workers or settings.workers

    if bind_workers > 1 and settings.database_url.startswith("sqlite"):
        click.echo(
            "Error: SQLite does not support multiple worker processes. "
            "Use --workers 1 or configure another database.",
            err=True,
        )
        raise SystemExit(1)

    # Configure logging before starting server
    configure_logging(settings)

    logger = get_logger(__name__)
    logger.info(
        "Starting Webman server",
        host=bind_host,
        port=bind_port,
        workers=bind_workers,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "webman.infrastructure.api.app:app",
        host=bind_host,
        port=bind_port,
        workers=1 if reload else bind_workers,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


@cli.command()
@click.option(
    "--force",
    is_flag=True,
    help="Skip confirmation prompt",
)
def init_db(force: bool) -> None:
    """Initialize the database.

    Creates all database tables and seeds the default header catalog.
    In production, use migrations instead.
    """
    from webman.infrastructure.persistence.database import (
        get_db_manager,
        init_database,
    )

    settings = get_settings()
    configure_logging(settings)

    if settings.is_production and not force:
        click.echo(
            "ERROR: Running in production mode. Use 'webman migrate' instead of init-db.",
            err=True,
        )
        raise SystemExit(1)

    if not force:
        click.confirm(
            "This will create all database tables. Continue?",
            abort=True,
            default=False,
        )

    async def initialize():
        try:
            await init_database()
            click.echo("Database initialized successfully.")
        finally:
            await get_db_manager().disconnect()

    asyncio.run(initialize())


@cli.command()
@click.option(
    "--config",
    "alembic_ini",
    type=click.Path(exists=True, dir_okay=False),
    default="alembic.ini",
    show_default=True,
    help="Path to alembic.ini",
)
@click.option(
    "--revision",
    type=str,
    default="head",
    show_default=True,
    help="Target revision",
)
def migrate(alembic_ini: str, revision: str) -> None:
    """Apply database migrations with Alembic."""
    from alembic import command
    from alembic.config import Config

    settings = get_settings()
    configure_logging(settings)
    logger = get_logger(__name__)

    config = Config(alembic_ini)
    config.set_main_option("sqlalchemy.url", settings.database_url)

    logger.info("Applying migrations", revision=revision)
    command.upgrade(config, revision)
    click.echo(f"Database upgraded to {revision}.")


@cli.command()
def info() -> None:
    """Display Webman configuration."""
    settings = get_settings()

    click.echo(f"""
Webman v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:  {settings.environment}
  Debug:        {settings.debug}
  API Prefix:   {settings.api_prefix or '/'}

Server:
  Host:         {settings.host}
  Port:         {settings.port}
  Workers:      {settings.workers}

Database:
  URL:          {settings.database_url}
  Echo:         {settings.db_echo}
  Auto-create:  {settings.db_auto_create}

Proxy:
  Timeout:      {settings.proxy_timeout if settings.proxy_timeout else 'none'}
  Redirects:    {settings.proxy_follow_redirects}

CORS:
  Origins:      {', '.join(settings.cors_origins)}

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `webman` command is run
    or when using `python -m webman`.
    """
    cli()


if __name__ == "__main__":
    main()
