"""Application service: Process Order use case.

Credits product stock for a delivered purchase order, once.

The order is claimed (``processed_at`` stamped atomically) after every
product has been verified and before any stock moves. A second call
therefore fails instead of crediting the stock twice, and a failure
half-way through stock crediting leaves the order claimed: stock is
credited at most once per order.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from ims.application.dto import OrderDTO
from ims.application.order_view import OrderViewAssembler
from ims.domain.exceptions import EntityNotFoundError, ValidationError
from ims.domain.repository.order_repository import OrderRepository
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.repository.supplier_repository import SupplierRepository
from ims.domain.service.stock_replenishment_service import (
    StockReplenishmentService,
)

logger = logging.getLogger(__name__)


class ProcessOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        supplier_repo: SupplierRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._supplier_repo = supplier_repo

    def handle(self, order_id: str) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order not found")

        order.ensure_processable()

        svc = StockReplenishmentService(self._product_repo)
        svc.verify_products(order)

        processed_at = datetime.now(timezone.utc)
        if not self._order_repo.claim_for_processing(order_id, processed_at):
            # Lost a race: someone else processed or re-statused it meanwhile.
            current = self._order_repo.get_by_id(order_id)
            if current is None:
                raise EntityNotFoundError("Order not found")
            current.ensure_processable()
            raise ValidationError("Order has already been processed")
        order.processed_at = processed_at

        svc.credit_order(order)
        logger.info("Processed order %s: stock credited for %d items", order_id, len(order.items))

        return OrderViewAssembler(self._supplier_repo, self._product_repo).to_dto(order)
