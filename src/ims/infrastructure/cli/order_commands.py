"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from ims.application.dto import OrderDTO
from ims.application.process_order import ProcessOrderHandler
from ims.application.show_order import ShowOrderHandler
from ims.application.update_order_status import UpdateOrderStatusHandler
from ims.domain.exceptions import DomainException
from ims.domain.model.order import OrderStatus
from ims.infrastructure.bootstrap import (
    order_repository,
    product_repository,
    supplier_repository,
)


def _repos() -> tuple:
    return order_repository(), product_repository(), supplier_repository()


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    supplier = dto.supplier.name if dto.supplier else f"<deleted {dto.supplier_id}>"
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"Supplier: {supplier}")
    click.echo(f"Ordered:  {dto.order_date:%Y-%m-%d %H:%M} UTC")
    if dto.processed_at is not None:
        click.echo(f"Processed: {dto.processed_at:%Y-%m-%d %H:%M} UTC")
    click.echo()

    click.echo(f"  {'SKU':<12} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*61}")
    for item in dto.items:
        sku = item.product.sku if item.product else "?"
        name = item.product.name if item.product else "<deleted>"
        click.echo(
            f"  {sku:<12} {name:<20} {item.qty:>5} "
            f"{item.price:>10.2f} {item.line_total:>10.2f}"
        )
    click.echo(f"  {'-'*61}")
    click.echo(f"  {'Order Total':<39} {dto.total_amount:>21.2f}")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(*_repos())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option(
    "--status",
    required=True,
    type=click.Choice([s.value for s in OrderStatus]),
    help="New status.",
)
def order_status(order_id: str, status: str) -> None:
    """Move an order to another status."""
    handler = UpdateOrderStatusHandler(*_repos())

    try:
        dto = handler.handle(order_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} is now {dto.status}.")


@click.command("process")
@click.option("--id", "order_id", required=True, help="Delivered order to process.")
def order_process(order_id: str) -> None:
    """Credit product stock for a delivered order."""
    handler = ProcessOrderHandler(*_repos())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} processed, stock updated.")
    for item in dto.items:
        if item.product is not None:
            click.echo(f"  {item.product.sku:<12} +{item.qty:<5} -> {item.product.stock}")
