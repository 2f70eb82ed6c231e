"""MongoDB-backed implementation of SupplierRepository."""

from __future__ import annotations

from pymongo.collection import Collection

from ims.domain.exceptions import EntityNotFoundError
from ims.domain.model.supplier import Contact, Supplier
from ims.domain.repository.query import PageRequest, SortSpec
from ims.domain.repository.supplier_repository import SupplierRepository
from ims.infrastructure.persistence.mongo_support import (
    find_page,
    text_filter,
    to_object_id,
    translate_errors,
    utcnow,
)

DUPLICATE_EMAIL = "Supplier with this email already exists"


class MongoSupplierRepository(SupplierRepository):

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    # --- SupplierRepository interface -----------------------------------------

    def get_by_id(self, supplier_id: str) -> Supplier | None:
        oid = to_object_id(supplier_id)
        if oid is None:
            return None
        with translate_errors():
            raw = self._collection.find_one({"_id": oid})
        return self._to_domain(raw) if raw else None

    def get_by_email(self, email: str) -> Supplier | None:
        with translate_errors():
            raw = self._collection.find_one({"contact.email": email})
        return self._to_domain(raw) if raw else None

    def search(
        self, text: str | None, sort: SortSpec, page: PageRequest
    ) -> tuple[list[Supplier], int]:
        docs, total = find_page(
            self._collection, text_filter(text, ["name", "contact.email"]), sort, page
        )
        return [self._to_domain(raw) for raw in docs], total

    def add(self, supplier: Supplier) -> None:
        supplier.created_at = supplier.updated_at = utcnow()
        with translate_errors(DUPLICATE_EMAIL):
            result = self._collection.insert_one(self._to_raw(supplier))
        supplier.id = str(result.inserted_id)

    def save(self, supplier: Supplier) -> None:
        supplier.updated_at = utcnow()
        oid = to_object_id(supplier.id)  # type: ignore[arg-type]
        with translate_errors(DUPLICATE_EMAIL):
            result = self._collection.update_one(
                {"_id": oid}, {"$set": self._to_raw(supplier)}
            )
        if result.matched_count == 0:
            raise EntityNotFoundError("Supplier not found")

    def delete(self, supplier_id: str) -> bool:
        oid = to_object_id(supplier_id)
        if oid is None:
            return False
        with translate_errors():
            result = self._collection.delete_one({"_id": oid})
        return result.deleted_count == 1

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(supplier: Supplier) -> dict:
        return {
            "name": supplier.name,
            "contact": {
                "email": supplier.contact.email,
                "phone": supplier.contact.phone,
                "address": supplier.contact.address,
            },
            "createdAt": supplier.created_at,
            "updatedAt": supplier.updated_at,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Supplier:
        contact = raw.get("contact") or {}
        return Supplier(
            id=str(raw["_id"]),
            name=raw["name"],
            contact=Contact(
                email=contact.get("email", ""),
                phone=contact.get("phone", ""),
                address=contact.get("address", ""),
            ),
            created_at=raw.get("createdAt") or utcnow(),
            updated_at=raw.get("updatedAt") or utcnow(),
        )
