"""Application service: Update Order use case.

Any subset of items, supplier and status may be supplied; each one is
validated on its own and omitted fields are left untouched.
"""

from __future__ import annotations

from ims.application.dto import OrderDTO, OrderItemSpec
from ims.application.order_items import build_line_items
from ims.application.order_view import OrderViewAssembler
from ims.domain.exceptions import EntityNotFoundError, ReferenceNotFoundError
from ims.domain.model.order import OrderStatus
from ims.domain.repository.order_repository import OrderRepository
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.repository.supplier_repository import SupplierRepository


class UpdateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        supplier_repo: SupplierRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._supplier_repo = supplier_repo

    def handle(
        self,
        order_id: str,
        item_specs: list[OrderItemSpec] | None = None,
        supplier_id: str | None = None,
        status: str | None = None,
    ) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order not found")

        changed: list[str] = []
        if item_specs is not None:
            order.replace_items(build_line_items(item_specs, self._product_repo))
            changed.append("items")

        if supplier_id is not None:
            if self._supplier_repo.get_by_id(supplier_id) is None:
                raise ReferenceNotFoundError("Supplier not found")
            order.change_supplier(supplier_id)
            changed.append("supplier_id")

        if status is not None:
            order.change_status(OrderStatus.parse(status))
            changed.append("status")

        self._order_repo.save(order, changed)
        return OrderViewAssembler(self._supplier_repo, self._product_repo).to_dto(order)
