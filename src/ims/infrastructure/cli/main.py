import click

from ims.config import Settings
from ims.infrastructure.bootstrap import build_container
from ims.infrastructure.cli.inventory_commands import inventory_value
from ims.infrastructure.cli.manager_commands import manager_add
from ims.infrastructure.cli.product_commands import product_list
from ims.infrastructure.cli.server_commands import init_db, serve
from ims.infrastructure.logging import configure_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """IMS: Inventory Management System"""
    if ctx.obj is None:
        settings = Settings.from_env()
        configure_logging(settings)
        ctx.obj = build_container(settings)


@cli.group()
def manager() -> None:
    """Manage manager accounts."""


@cli.group()
def product() -> None:
    """Inspect products."""


@cli.group()
def inventory() -> None:
    """Inspect inventory."""


# Register subcommands
cli.add_command(init_db)
cli.add_command(serve)
manager.add_command(manager_add)
product.add_command(product_list)
inventory.add_command(inventory_value)
