"""CLI commands for database setup and the HTTP server."""

from __future__ import annotations

import click

from ims.domain.exceptions import DomainException
from ims.infrastructure.bootstrap import Container, initialize_database
from ims.infrastructure.web.app import create_app


@click.command("init-db")
@click.pass_obj
def init_db(container: Container) -> None:
    """Create tables and seed the default manager."""
    try:
        seeded = initialize_database(container)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Database initialized.")
    if seeded is not None:
        click.echo(f"Default manager '{seeded.email}' created.")
    elif container.settings.default_manager_password is None:
        click.echo("No default manager seeded (IMS_DEFAULT_MANAGER_PASSWORD is not set).")


@click.command("serve")
@click.option("--host", default=None, help="Bind address (defaults to IMS_HOST).")
@click.option("--port", default=None, type=int, help="Port (defaults to IMS_PORT).")
@click.option("--debug", is_flag=True, help="Run Flask in debug mode.")
@click.pass_obj
def serve(container: Container, host: str | None, port: int | None, debug: bool) -> None:
    """Run the HTTP API."""
    try:
        initialize_database(container)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    app = create_app(
        inventory_service=container.inventory_service,
        auth_service=container.auth_service,
        token_generator=container.token_generator,
    )
    settings = container.settings
    app.run(host=host or settings.host, port=port or settings.port, debug=debug)
