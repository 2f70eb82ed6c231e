"""Application service: Add Product use case."""

from __future__ import annotations

import logging
from decimal import Decimal

from ims.domain.exceptions import ConflictError, ValidationError
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money
from ims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        sku: str | None,
        name: str | None,
        price: str | float | Decimal | None,
        stock: int | None = None,
    ) -> Product:
        """Add a new product to the catalog.

        The SKU is checked here first; the store's unique index catches
        a concurrent insert that slips past the check, and the repository
        reports that as the same ConflictError.
        """
        if not sku or not name or price is None:
            raise ValidationError("SKU, name, and price are required")

        product = Product.create(
            sku=sku,
            name=name,
            price=Money.of(price),
            stock=0 if stock is None else stock,
        )

        if self._product_repo.get_by_sku(product.sku) is not None:
            raise ConflictError("Product with this SKU already exists")

        self._product_repo.add(product)
        logger.info("Added product %s (%s)", product.sku, product.id)
        return product
