"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from ims.domain.exceptions import DomainException
from ims.infrastructure.bootstrap import Container


@click.command("list")
@click.pass_obj
def product_list(container: Container) -> None:
    """List all products."""
    try:
        products = container.inventory_service.get_all_products()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    threshold = container.settings.low_stock_threshold
    click.echo(f"{'ID':<36}  {'Name':<20} {'Price':>10} {'Qty':>6}")
    click.echo("-" * 76)
    for p in products:
        flag = "  LOW" if p.is_low_stock(threshold) else ""
        click.echo(f"{p.id:<36}  {p.name:<20} {str(p.price):>10} {p.quantity:>6}{flag}")
