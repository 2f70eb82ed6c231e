"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (MongoDB, in-memory)
live in the infrastructure layer and in the test suite.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from ims.domain.model.product import Product
from ims.domain.repository.query import PageRequest, SortSpec


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_sku(self, sku: str) -> Product | None:
        """Return a product by its normalized (uppercase) SKU, or None."""

    @abstractmethod
    def search(
        self, text: str | None, sort: SortSpec, page: PageRequest
    ) -> tuple[list[Product], int]:
        """Return one page of products whose name or SKU contains ``text``
        (case-insensitive), plus the total number of matches."""

    @abstractmethod
    def add(self, product: Product) -> None:
        """Insert a new product and assign its ID.

        Raises ConflictError if the SKU is already taken.
        """

    @abstractmethod
    def save(self, product: Product, fields: Iterable[str]) -> None:
        """Write the named attributes of an existing product.

        Only ``fields`` (any of ``sku``, ``name``, ``price``, ``stock``) are
        written, so a concurrent ``increment_stock`` is not overwritten by
        an update that never touched the stock.

        Raises ConflictError if the SKU is already taken by another product.
        """

    @abstractmethod
    def delete(self, product_id: str) -> bool:
        """Remove a product. Return False if it did not exist."""

    @abstractmethod
    def increment_stock(self, product_id: str, delta: int) -> Product | None:
        """Atomically add ``delta`` (may be negative) to the product's stock.

        A negative ``delta`` only applies while the stock stays >= 0.
        Returns the updated product, or None when the product does not
        exist or the decrement was refused.
        """
