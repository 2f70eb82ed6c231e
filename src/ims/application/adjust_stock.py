"""Application service: Adjust Stock use case.

``add`` and ``subtract`` go through the repository's atomic increment so
concurrent adjustments never lose an update, and a subtraction can never
take stock below zero even if the stock moved after it was read here.
"""

from __future__ import annotations

import logging
from enum import Enum

from ims.domain.exceptions import EntityNotFoundError, ValidationError
from ims.domain.model.product import Product
from ims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class StockOperation(Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    SET = "set"

    @classmethod
    def parse(cls, value: str) -> StockOperation:
        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError):
            raise ValidationError(
                "Invalid operation. Use add, subtract, or set"
            ) from None


class AdjustStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, operation: str | None, quantity: int | None) -> Product:
        if not operation or quantity is None:
            raise ValidationError("Operation and quantity are required")
        op = StockOperation.parse(operation)
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValidationError(f"Quantity must be an integer, got {quantity!r}")
        if quantity < 0:
            raise ValidationError("Quantity cannot be negative")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product not found")

        if op is StockOperation.SET:
            product.set_stock(quantity)
            self._product_repo.save(product, ["stock"])
            updated: Product | None = product
        elif op is StockOperation.ADD:
            updated = self._product_repo.increment_stock(product_id, quantity)
        else:
            if not product.can_remove(quantity):
                raise ValidationError("Insufficient stock")
            updated = self._product_repo.increment_stock(product_id, -quantity)
            if updated is None and self._product_repo.get_by_id(product_id) is not None:
                # Stock dropped between the read and the guarded decrement.
                raise ValidationError("Insufficient stock")

        if updated is None:
            raise EntityNotFoundError("Product not found")

        logger.info(
            "Stock %s %d on %s -> %d", op.value, quantity, updated.sku, updated.stock
        )
        return updated
