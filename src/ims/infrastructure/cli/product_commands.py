"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from ims.application.adjust_stock import AdjustStockHandler
from ims.application.list_products import ListProductsHandler
from ims.domain.exceptions import DomainException
from ims.infrastructure.bootstrap import product_repository


@click.command("list")
@click.option("--search", default=None, help="Filter by name or SKU (case-insensitive).")
@click.option("--page", default=1, show_default=True, type=int)
@click.option("--limit", default=20, show_default=True, type=int)
def product_list(search: str | None, page: int, limit: int) -> None:
    """List products in the catalog."""
    handler = ListProductsHandler(product_repo=product_repository())

    try:
        result = handler.handle(search=search, page=page, limit=limit)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.items:
        click.echo("No products found.")
        return

    click.echo(f"{'SKU':<12} {'Name':<24} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 56)
    for p in result.items:
        click.echo(f"{p.sku:<12} {p.name:<24} {str(p.price):>10} {p.stock:>7}")
    click.echo(f"Page {result.current_page} of {max(result.total_pages, 1)} ({result.total} products)")


@click.command("stock")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option(
    "--operation",
    required=True,
    type=click.Choice(["add", "subtract", "set"], case_sensitive=False),
)
@click.option("--quantity", required=True, type=click.IntRange(min=0))
def product_stock(product_id: str, operation: str, quantity: int) -> None:
    """Add to, subtract from, or overwrite a product's stock."""
    handler = AdjustStockHandler(product_repo=product_repository())

    try:
        product = handler.handle(product_id, operation, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{product.sku}: stock is now {product.stock}")
