"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, stock moves, products are added and removed from the
catalog. Orders hold a weak reference (``product_id``) and a price
snapshot, so removing a product never touches existing orders.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ims.domain.exceptions import ValidationError
from ims.domain.model.value_objects import Money, Sku


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _require_name(name: str | None) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Product name is required")
    return name.strip()


def _require_stock(stock: int) -> int:
    if isinstance(stock, bool) or not isinstance(stock, int):
        raise ValidationError(f"Stock must be an integer, got {stock!r}")
    if stock < 0:
        raise ValidationError("Stock cannot be negative")
    return stock


@dataclass
class Product:
    """A product in the catalog.

    Invariants:
    - ``sku`` is trimmed and uppercase
    - ``stock`` is never negative
    """

    id: str | None
    sku: str
    name: str
    price: Money
    stock: int = 0
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    # Wire field -> attribute, for sorting.
    SORTABLE_FIELDS = {
        "sku": "sku",
        "name": "name",
        "price": "price",
        "stock": "stock",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
    }

    @staticmethod
    def create(sku: str, name: str, price: Money, stock: int = 0) -> Product:
        """Create a new, not yet persisted product."""
        return Product(
            id=None,
            sku=Sku(sku).value,
            name=_require_name(name),
            price=price,
            stock=_require_stock(stock),
        )

    def rename(self, name: str) -> None:
        self.name = _require_name(name)

    def change_sku(self, sku: str) -> None:
        self.sku = Sku(sku).value

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because orders
        capture a price snapshot at creation time.
        """
        self.price = new_price

    def set_stock(self, quantity: int) -> None:
        self.stock = _require_stock(quantity)

    def can_remove(self, quantity: int) -> bool:
        return quantity <= self.stock
