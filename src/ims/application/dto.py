"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the API/CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: one requested line (raw values, validated by the handler)."""

    product_id: str | None
    qty: Any
    price: Any


@dataclass(frozen=True)
class Page(Generic[T]):
    """Output: one page of a list query."""

    items: list[T]
    total: int
    current_page: int
    total_pages: int


@dataclass(frozen=True)
class SupplierSummaryDTO:
    id: str
    name: str
    email: str


@dataclass(frozen=True)
class ProductSummaryDTO:
    id: str
    sku: str
    name: str
    price: Decimal
    stock: int


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a line item. ``product`` is None when the product was deleted."""

    product_id: str
    product: ProductSummaryDTO | None
    qty: int
    price: Decimal
    line_total: Decimal


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order joined with its supplier and products."""

    id: str
    supplier_id: str
    supplier: SupplierSummaryDTO | None
    items: list[OrderLineItemDTO]
    status: str
    total_amount: Decimal
    order_date: datetime
    processed_at: datetime | None
    created_at: datetime
    updated_at: datetime
