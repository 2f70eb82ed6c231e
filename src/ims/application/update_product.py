"""Application service: Update Product use case."""

from __future__ import annotations

from decimal import Decimal

from ims.domain.exceptions import ConflictError, EntityNotFoundError
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money, Sku
from ims.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        sku: str | None = None,
        name: str | None = None,
        price: str | float | Decimal | None = None,
        stock: int | None = None,
    ) -> Product:
        """Change only the supplied fields of a product.

        A new price does NOT affect any existing orders — they captured a
        price snapshot at creation time. Stock moved by a concurrent
        adjustment survives unless ``stock`` itself is supplied.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product not found")

        changed: list[str] = []
        if sku is not None:
            new_sku = Sku(sku).value
            if new_sku != product.sku:
                other = self._product_repo.get_by_sku(new_sku)
                if other is not None and other.id != product.id:
                    raise ConflictError("Product with this SKU already exists")
            product.change_sku(new_sku)
            changed.append("sku")
        if name is not None:
            product.rename(name)
            changed.append("name")
        if price is not None:
            product.update_price(Money.of(price))
            changed.append("price")
        if stock is not None:
            product.set_stock(stock)
            changed.append("stock")

        self._product_repo.save(product, changed)
        return self._product_repo.get_by_id(product_id) or product
