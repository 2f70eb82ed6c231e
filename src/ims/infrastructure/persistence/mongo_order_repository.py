"""MongoDB-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from pymongo.collection import Collection

from ims.domain.exceptions import EntityNotFoundError
from ims.domain.model.order import Order, OrderLineItem, OrderStatus
from ims.domain.model.value_objects import Money, Quantity
from ims.domain.repository.order_repository import OrderRepository
from ims.domain.repository.query import PageRequest, SortSpec
from ims.infrastructure.persistence.mongo_support import (
    find_page,
    from_stored_number,
    to_decimal128,
    to_object_id,
    to_reference,
    translate_errors,
    utcnow,
)

# Attribute -> document keys it owns, for partial updates.
FIELD_KEYS = {
    "items": ("items", "totalAmount"),
    "supplier_id": ("supplierId",),
    "status": ("status",),
}


class MongoOrderRepository(OrderRepository):

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: str) -> Order | None:
        oid = to_object_id(order_id)
        if oid is None:
            return None
        with translate_errors():
            raw = self._collection.find_one({"_id": oid})
        return self._to_domain(raw) if raw else None

    def search(
        self,
        status: OrderStatus | None,
        supplier_id: str | None,
        sort: SortSpec,
        page: PageRequest,
    ) -> tuple[list[Order], int]:
        query: dict = {}
        if status is not None:
            query["status"] = status.value
        if supplier_id:
            query["supplierId"] = to_reference(supplier_id)
        docs, total = find_page(self._collection, query, sort, page)
        return [self._to_domain(raw) for raw in docs], total

    def add(self, order: Order) -> None:
        order.created_at = order.updated_at = utcnow()
        with translate_errors():
            result = self._collection.insert_one(self._to_raw(order))
        order.id = str(result.inserted_id)

    def save(self, order: Order, fields: Iterable[str]) -> None:
        order.updated_at = utcnow()
        oid = to_object_id(order.id)  # type: ignore[arg-type]
        raw = self._to_raw(order)
        # processedAt is only ever written by claim_for_processing.
        changes = {key: raw[key] for f in fields for key in FIELD_KEYS[f]}
        changes["updatedAt"] = order.updated_at
        with translate_errors():
            result = self._collection.update_one({"_id": oid}, {"$set": changes})
        if result.matched_count == 0:
            raise EntityNotFoundError("Order not found")

    def delete(self, order_id: str) -> bool:
        oid = to_object_id(order_id)
        if oid is None:
            return False
        with translate_errors():
            result = self._collection.delete_one({"_id": oid})
        return result.deleted_count == 1

    def claim_for_processing(self, order_id: str, processed_at: datetime) -> bool:
        oid = to_object_id(order_id)
        if oid is None:
            return False
        with translate_errors():
            result = self._collection.update_one(
                {
                    "_id": oid,
                    "status": OrderStatus.DELIVERED.value,
                    "processedAt": None,
                },
                {"$set": {"processedAt": processed_at, "updatedAt": processed_at}},
            )
        return result.modified_count == 1

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "items": [
                {
                    "productId": to_reference(item.product_id),
                    "qty": item.quantity.value,
                    "price": to_decimal128(item.unit_price.amount),
                }
                for item in order.items
            ],
            "supplierId": to_reference(order.supplier_id),
            "status": order.status.value,
            # Stored for sorting and reporting; always recomputed from items.
            "totalAmount": to_decimal128(order.total_amount.amount),
            "orderDate": order.order_date,
            "processedAt": order.processed_at,
            "createdAt": order.created_at,
            "updatedAt": order.updated_at,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderLineItem(
                product_id=str(i["productId"]),
                quantity=Quantity(int(i["qty"])),
                unit_price=Money(from_stored_number(i["price"])),
            )
            for i in raw.get("items", [])
        ]
        return Order(
            id=str(raw["_id"]),
            supplier_id=str(raw["supplierId"]),
            items=items,
            status=OrderStatus(raw["status"]),
            order_date=raw.get("orderDate") or raw.get("createdAt") or utcnow(),
            processed_at=raw.get("processedAt"),
            created_at=raw.get("createdAt") or utcnow(),
            updated_at=raw.get("updatedAt") or utcnow(),
        )
