"""Domain service: Stock Replenishment.

Crediting stock for a delivered purchase order touches one Product per
line item, so it lives here rather than on either aggregate.

Two phases:
  Phase 1 — load and validate: every referenced product must still
            exist.  Fails before any stock is touched.
  Phase 2 — one atomic increment per line item.  The store offers no
            multi-document transaction, so a failure here is not rolled
            back; increments already applied stay applied.
"""

from __future__ import annotations

import logging

from ims.domain.exceptions import PersistenceError, ReferenceNotFoundError
from ims.domain.model.order import Order
from ims.domain.model.product import Product
from ims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class StockReplenishmentService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def verify_products(self, order: Order) -> None:
        """Phase 1: raise ReferenceNotFoundError if any line's product is gone."""
        for line in order.items:
            if self._product_repo.get_by_id(line.product_id) is None:
                raise ReferenceNotFoundError(
                    f"Product with ID {line.product_id} not found"
                )

    def credit_order(self, order: Order) -> list[Product]:
        """Phase 2: add each line's quantity to its product's stock."""
        updated: list[Product] = []
        for line in order.items:
            product = self._product_repo.increment_stock(
                line.product_id, line.quantity.value
            )
            if product is None:
                raise PersistenceError(
                    f"Stock update for product {line.product_id} failed after "
                    f"{len(updated)} of {len(order.items)} items were credited"
                )
            logger.info(
                "Credited %d units to %s (stock now %d)",
                line.quantity.value, product.sku, product.stock,
            )
            updated.append(product)
        return updated
