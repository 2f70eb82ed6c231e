"""Order aggregate — the core of the domain.

An Order is a purchase order placed with a supplier. It owns its line
items; ``total_amount`` is always derived from them. Delivery of an
order is what replenishes product stock (see ``process``-related
helpers below and ``StockReplenishmentService``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from ims.domain.exceptions import ValidationError
from ims.domain.model.value_objects import Money, Quantity


def _now() -> datetime:
    return datetime.now(timezone.utc)


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @classmethod
    def parse(cls, value: str | None) -> OrderStatus:
        """Resolve a wire value, raising ValidationError when it is not in the enum."""
        if not value:
            raise ValidationError("Status is required")
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(
                f"Invalid status. Must be one of: {', '.join(s.value for s in cls)}"
            ) from None


# ---------------------------------------------------------------------------
# Transition table. Purchase orders may be moved between any two states
# (e.g. a cancelled order can be re-opened), so every edge is allowed.
# ---------------------------------------------------------------------------
ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    status: frozenset(OrderStatus) for status in OrderStatus
}


@dataclass(frozen=True)
class OrderLineItem:
    """One product line. ``unit_price`` is the caller's snapshot, not the live price."""

    product_id: str
    quantity: Quantity
    unit_price: Money

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for purchase orders.

    Use the ``Order.create()`` factory for new orders — it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: str | None
    supplier_id: str
    items: list[OrderLineItem]
    status: OrderStatus = OrderStatus.PENDING
    order_date: datetime = field(default_factory=_now)
    processed_at: datetime | None = None
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    SORTABLE_FIELDS = {
        "orderDate": "order_date",
        "status": "status",
        "totalAmount": "total_amount",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
    }

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(supplier_id: str, items: list[OrderLineItem]) -> Order:
        """Create a new pending order."""
        if not supplier_id:
            raise ValidationError("Supplier ID is required")
        order = Order(id=None, supplier_id=supplier_id, items=[])
        order.replace_items(items)
        return order

    # --- Mutations ------------------------------------------------------------

    def replace_items(self, items: list[OrderLineItem]) -> None:
        if not items:
            raise ValidationError("Order must contain at least one item")
        self.items = list(items)

    def change_supplier(self, supplier_id: str) -> None:
        if not supplier_id:
            raise ValidationError("Supplier ID is required")
        self.supplier_id = supplier_id

    def change_status(self, new_status: OrderStatus) -> None:
        if new_status not in ALLOWED_TRANSITIONS[self.status]:
            raise ValidationError(
                f"Cannot move order from {self.status.value} to {new_status.value}"
            )
        self.status = new_status

    def ensure_processable(self) -> None:
        """Raise unless stock may be credited for this order now."""
        if self.status != OrderStatus.DELIVERED:
            raise ValidationError("Order must be delivered to process stock update")
        if self.is_processed:
            raise ValidationError("Order has already been processed")

    # --- Computed properties --------------------------------------------------

    @property
    def total_amount(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def is_processed(self) -> bool:
        return self.processed_at is not None
