"""Pydantic request bodies.

Every field is optional at this level: presence rules live in the
application handlers so a missing field yields the same ``{"error": ...}``
message whether the call comes from HTTP or the CLI. Pydantic only
rejects values of the wrong type.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProductCreateRequest(BaseModel):
    sku: Optional[str] = None
    name: Optional[str] = None
    price: Optional[Decimal] = None
    stock: Optional[int] = None


class ProductUpdateRequest(ProductCreateRequest):
    pass


class StockAdjustRequest(BaseModel):
    operation: Optional[str] = Field(None, description="add | subtract | set")
    quantity: Optional[int] = None


class ContactRequest(BaseModel):
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None


class SupplierCreateRequest(BaseModel):
    name: Optional[str] = None
    contact: Optional[ContactRequest] = None


class SupplierUpdateRequest(SupplierCreateRequest):
    pass


class OrderItemRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: Optional[str] = Field(None, alias="productId")
    qty: Optional[int] = None
    price: Optional[Decimal] = Field(None, description="Unit price agreed for this order")


class OrderCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    items: Optional[list[OrderItemRequest]] = None
    supplier_id: Optional[str] = Field(None, alias="supplierId")


class OrderUpdateRequest(OrderCreateRequest):
    status: Optional[str] = None


class OrderStatusRequest(BaseModel):
    status: Optional[str] = None
