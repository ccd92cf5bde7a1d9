"""CLI commands for manager accounts."""

from __future__ import annotations

import click

from ims.domain.exceptions import DomainException
from ims.infrastructure.bootstrap import Container


@click.command("add")
@click.option("--email", required=True, help="Login email.")
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
@click.pass_obj
def manager_add(container: Container, email: str, password: str) -> None:
    """Register a new manager."""
    try:
        manager = container.auth_service.register_manager(email=email, password=password)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Manager '{manager.email}' added (id {manager.id})")
