"""Domain objects and DTOs -> JSON-ready dicts (camelCase, as clients expect)."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Callable

from ims.application.dto import OrderDTO, Page
from ims.domain.model.product import Product
from ims.domain.model.supplier import Supplier


def _number(value: Decimal) -> float:
    return float(value)


def _timestamp(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def product_to_json(product: Product) -> dict[str, Any]:
    return {
        "id": product.id,
        "sku": product.sku,
        "name": product.name,
        "price": _number(product.price.amount),
        "stock": product.stock,
        "createdAt": _timestamp(product.created_at),
        "updatedAt": _timestamp(product.updated_at),
    }


def supplier_to_json(supplier: Supplier) -> dict[str, Any]:
    return {
        "id": supplier.id,
        "name": supplier.name,
        "contact": {
            "email": supplier.contact.email,
            "phone": supplier.contact.phone,
            "address": supplier.contact.address,
        },
        "createdAt": _timestamp(supplier.created_at),
        "updatedAt": _timestamp(supplier.updated_at),
    }


def order_to_json(order: OrderDTO) -> dict[str, Any]:
    supplier = None
    if order.supplier is not None:
        supplier = {
            "id": order.supplier.id,
            "name": order.supplier.name,
            "contact": {"email": order.supplier.email},
        }

    items = []
    for item in order.items:
        product = None
        if item.product is not None:
            product = {
                "id": item.product.id,
                "sku": item.product.sku,
                "name": item.product.name,
                "price": _number(item.product.price),
                "stock": item.product.stock,
            }
        items.append(
            {
                "productId": item.product_id,
                "product": product,
                "qty": item.qty,
                "price": _number(item.price),
                "lineTotal": _number(item.line_total),
            }
        )

    return {
        "id": order.id,
        "supplierId": order.supplier_id,
        "supplier": supplier,
        "items": items,
        "status": order.status,
        "totalAmount": _number(order.total_amount),
        "orderDate": _timestamp(order.order_date),
        "processedAt": _timestamp(order.processed_at),
        "createdAt": _timestamp(order.created_at),
        "updatedAt": _timestamp(order.updated_at),
    }


def page_to_json(page: Page, item_to_json: Callable[[Any], dict]) -> dict[str, Any]:
    return {
        "items": [item_to_json(item) for item in page.items],
        "totalPages": page.total_pages,
        "currentPage": page.current_page,
        "total": page.total,
    }
