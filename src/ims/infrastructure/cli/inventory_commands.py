"""CLI commands for inventory valuation."""

from __future__ import annotations

import click

from ims.domain.exceptions import DomainException
from ims.infrastructure.bootstrap import Container


@click.command("value")
@click.pass_obj
def inventory_value(container: Container) -> None:
    """Show the total value of stock on hand."""
    try:
        value = container.inventory_service.get_inventory_value()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Inventory value: {value}")
