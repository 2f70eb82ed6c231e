"""Helpers shared by the MongoDB repositories: ids, decimals, queries, errors."""

from __future__ import annotations

import re
from contextlib import contextmanager
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Iterator

import pymongo
from bson import ObjectId
from bson.decimal128 import Decimal128
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from ims.domain.exceptions import ConflictError, PersistenceError
from ims.domain.repository.query import PageRequest, SortSpec

PRODUCTS = "products"
SUPPLIERS = "suppliers"
ORDERS = "orders"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# --- Identifiers --------------------------------------------------------------


def to_object_id(value: str) -> ObjectId | None:
    """Parse a client-supplied id; an unparsable id simply matches nothing."""
    if isinstance(value, ObjectId):
        return value
    if not value or not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


def to_reference(value: str) -> ObjectId | str:
    """Store references as ObjectId where possible, so they join with ``_id``."""
    return to_object_id(value) or value


# --- Decimals -----------------------------------------------------------------


def to_decimal128(value: Decimal) -> Decimal128:
    return Decimal128(value)


def from_stored_number(value: Any) -> Decimal:
    """Read a price stored as Decimal128, or as a plain number by older writers."""
    if isinstance(value, Decimal128):
        return value.to_decimal()
    return Decimal(str(value))


# --- Queries ------------------------------------------------------------------


def text_filter(text: str | None, fields: list[str]) -> dict:
    """Case-insensitive substring match on any of ``fields``."""
    if not text:
        return {}
    pattern = re.escape(text)
    return {"$or": [{f: {"$regex": pattern, "$options": "i"}} for f in fields]}


def find_page(collection, query: dict, sort: SortSpec, page: PageRequest) -> tuple[list[dict], int]:
    direction = pymongo.DESCENDING if sort.descending else pymongo.ASCENDING
    with translate_errors():
        cursor = (
            collection.find(query)
            .sort([(sort.field, direction), ("_id", direction)])
            .skip(page.skip)
            .limit(page.limit)
        )
        docs = list(cursor)
        total = collection.count_documents(query)
    return docs, total


# --- Errors -------------------------------------------------------------------


@contextmanager
def translate_errors(conflict_message: str = "Duplicate key") -> Iterator[None]:
    """Re-raise driver errors as domain errors.

    A unique-index violation becomes ConflictError, the same error the
    handlers raise from their own pre-check.
    """
    try:
        yield
    except DuplicateKeyError as exc:
        raise ConflictError(conflict_message) from exc
    except PyMongoError as exc:
        raise PersistenceError(f"Database error: {exc}") from exc


# --- Indexes ------------------------------------------------------------------


def ensure_indexes(database: Database) -> None:
    with translate_errors():
        products = database[PRODUCTS]
        products.create_index("sku", unique=True)
        products.create_index("name")

        suppliers = database[SUPPLIERS]
        suppliers.create_index("name")
        suppliers.create_index("contact.email", unique=True)

        orders = database[ORDERS]
        orders.create_index("supplierId")
        orders.create_index("status")
        orders.create_index([("orderDate", pymongo.DESCENDING)])
