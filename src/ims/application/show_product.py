"""Application service: Show Product use cases (queries)."""

from __future__ import annotations

from ims.domain.exceptions import EntityNotFoundError
from ims.domain.model.product import Product
from ims.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product not found")
        return product


class FindProductBySkuHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, sku: str) -> Product:
        """Look a product up by SKU, ignoring case."""
        product = self._product_repo.get_by_sku(sku.strip().upper())
        if product is None:
            raise EntityNotFoundError("Product not found")
        return product
