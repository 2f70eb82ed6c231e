import click

from ims.infrastructure import bootstrap
from ims.infrastructure.cli.order_commands import order_process, order_show, order_status
from ims.infrastructure.cli.product_commands import product_list, product_stock
from ims.infrastructure.cli.server_commands import init_db, serve
from ims.infrastructure.logging_config import configure_logging


@click.group()
def cli() -> None:
    """IMS — Inventory Management System"""
    configure_logging(bootstrap.settings().log_level)


@cli.group()
def order() -> None:
    """Manage purchase orders."""


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
cli.add_command(serve)
cli.add_command(init_db)
order.add_command(order_process)
order.add_command(order_show)
order.add_command(order_status)
product.add_command(product_list)
product.add_command(product_stock)
