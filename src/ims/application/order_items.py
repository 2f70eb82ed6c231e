"""Validation of requested order lines, shared by create and update."""

from __future__ import annotations

from ims.application.dto import OrderItemSpec
from ims.domain.exceptions import ReferenceNotFoundError, ValidationError
from ims.domain.model.order import OrderLineItem
from ims.domain.model.value_objects import Money, Quantity
from ims.domain.repository.product_repository import ProductRepository


def _coerce_qty(raw) -> int:
    if isinstance(raw, bool):
        raise ValidationError(f"Invalid quantity: {raw!r}")
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError:
        raise ValidationError(f"Invalid quantity: {raw!r}") from None


def build_line_items(
    specs: list[OrderItemSpec] | None,
    product_repo: ProductRepository,
) -> list[OrderLineItem]:
    """Turn raw item specs into line items, checking every product exists.

    The price comes from the request, not from the product: orders keep the
    price that was agreed with the supplier.
    """
    if not specs:
        raise ValidationError("Order must contain at least one item")

    line_items: list[OrderLineItem] = []
    for spec in specs:
        if not spec.product_id or spec.qty in (None, "") or spec.price in (None, ""):
            raise ValidationError("Each item must have productId, qty, and price")

        product = product_repo.get_by_id(spec.product_id)
        if product is None:
            raise ReferenceNotFoundError(f"Product with ID {spec.product_id} not found")

        line_items.append(
            OrderLineItem(
                product_id=product.id,  # type: ignore[arg-type]
                quantity=Quantity(_coerce_qty(spec.qty)),
                unit_price=Money.of(spec.price),  # <-- caller's price snapshot
            )
        )
    return line_items
