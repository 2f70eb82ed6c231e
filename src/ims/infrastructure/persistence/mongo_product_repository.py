"""MongoDB-backed implementation of ProductRepository."""

from __future__ import annotations

from typing import Iterable

from pymongo import ReturnDocument
from pymongo.collection import Collection

from ims.domain.exceptions import EntityNotFoundError
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.repository.query import PageRequest, SortSpec
from ims.infrastructure.persistence.mongo_support import (
    find_page,
    from_stored_number,
    text_filter,
    to_decimal128,
    to_object_id,
    translate_errors,
    utcnow,
)

DUPLICATE_SKU = "Product with this SKU already exists"

# Attribute names double as document keys for these.
UPDATABLE_FIELDS = ("sku", "name", "price", "stock")


class MongoProductRepository(ProductRepository):

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        oid = to_object_id(product_id)
        if oid is None:
            return None
        with translate_errors():
            raw = self._collection.find_one({"_id": oid})
        return self._to_domain(raw) if raw else None

    def get_by_sku(self, sku: str) -> Product | None:
        with translate_errors():
            raw = self._collection.find_one({"sku": sku})
        return self._to_domain(raw) if raw else None

    def search(
        self, text: str | None, sort: SortSpec, page: PageRequest
    ) -> tuple[list[Product], int]:
        docs, total = find_page(
            self._collection, text_filter(text, ["name", "sku"]), sort, page
        )
        return [self._to_domain(raw) for raw in docs], total

    def add(self, product: Product) -> None:
        product.created_at = product.updated_at = utcnow()
        with translate_errors(DUPLICATE_SKU):
            result = self._collection.insert_one(self._to_raw(product))
        product.id = str(result.inserted_id)

    def save(self, product: Product, fields: Iterable[str]) -> None:
        product.updated_at = utcnow()
        oid = to_object_id(product.id)  # type: ignore[arg-type]
        raw = self._to_raw(product)
        changes = {f: raw[f] for f in fields if f in UPDATABLE_FIELDS}
        changes["updatedAt"] = product.updated_at
        with translate_errors(DUPLICATE_SKU):
            result = self._collection.update_one({"_id": oid}, {"$set": changes})
        if result.matched_count == 0:
            raise EntityNotFoundError("Product not found")

    def delete(self, product_id: str) -> bool:
        oid = to_object_id(product_id)
        if oid is None:
            return False
        with translate_errors():
            result = self._collection.delete_one({"_id": oid})
        return result.deleted_count == 1

    def increment_stock(self, product_id: str, delta: int) -> Product | None:
        oid = to_object_id(product_id)
        if oid is None:
            return None
        query: dict = {"_id": oid}
        if delta < 0:
            query["stock"] = {"$gte": -delta}
        with translate_errors():
            raw = self._collection.find_one_and_update(
                query,
                {"$inc": {"stock": delta}, "$set": {"updatedAt": utcnow()}},
                return_document=ReturnDocument.AFTER,
            )
        return self._to_domain(raw) if raw else None

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "sku": product.sku,
            "name": product.name,
            "price": to_decimal128(product.price.amount),
            "stock": product.stock,
            "createdAt": product.created_at,
            "updatedAt": product.updated_at,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=str(raw["_id"]),
            sku=raw["sku"],
            name=raw["name"],
            price=Money(from_stored_number(raw["price"])),
            stock=int(raw.get("stock", 0)),
            created_at=raw.get("createdAt") or utcnow(),
            updated_at=raw.get("updatedAt") or utcnow(),
        )
