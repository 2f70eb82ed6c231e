"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
Supplier and every product are resolved before anything is written,
so a bad reference never leaves a half-built order behind.
"""

from __future__ import annotations

import logging

from ims.application.dto import OrderDTO, OrderItemSpec
from ims.application.order_items import build_line_items
from ims.application.order_view import OrderViewAssembler
from ims.domain.exceptions import ReferenceNotFoundError, ValidationError
from ims.domain.model.order import Order
from ims.domain.repository.order_repository import OrderRepository
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.repository.supplier_repository import SupplierRepository

logger = logging.getLogger(__name__)


class CreateOrderHandler:

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
        supplier_id: str | None,
        item_specs: list[OrderItemSpec] | None,
    ) -> OrderDTO:
        """Create a new pending purchase order.

        Steps:
        1. Reject an empty item list or a missing supplier ID.
        2. Resolve the supplier, then each item's product.
        3. Let the Order aggregate build itself (total is derived).
        4. Persist and return the enriched DTO.
        """
        if not item_specs:
            raise ValidationError("Order must contain at least one item")
        if not supplier_id:
            raise ValidationError("Supplier ID is required")

        if self._supplier_repo.get_by_id(supplier_id) is None:
            raise ReferenceNotFoundError("Supplier not found")

        line_items = build_line_items(item_specs, self._product_repo)

        order = Order.create(supplier_id=supplier_id, items=line_items)
        self._order_repo.add(order)
        logger.info(
            "Created order %s for supplier %s (total %s)",
            order.id, supplier_id, order.total_amount,
        )

        return OrderViewAssembler(self._supplier_repo, self._product_repo).to_dto(order)
