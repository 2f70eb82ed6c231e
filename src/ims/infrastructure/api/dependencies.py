"""FastAPI dependency providers. Tests swap these via ``app.dependency_overrides``."""

from __future__ import annotations

from ims.domain.repository.order_repository import OrderRepository
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.repository.supplier_repository import SupplierRepository
from ims.infrastructure import bootstrap


def get_product_repository() -> ProductRepository:
    return bootstrap.product_repository()


def get_supplier_repository() -> SupplierRepository:
    return bootstrap.supplier_repository()


def get_order_repository() -> OrderRepository:
    return bootstrap.order_repository()
