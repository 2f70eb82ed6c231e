"""Application service: Update Order Status use case."""

from __future__ import annotations

import logging

from ims.application.dto import OrderDTO
from ims.application.order_view import OrderViewAssembler
from ims.domain.exceptions import EntityNotFoundError
from ims.domain.model.order import OrderStatus
from ims.domain.repository.order_repository import OrderRepository
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.repository.supplier_repository import SupplierRepository

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        supplier_repo: SupplierRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._supplier_repo = supplier_repo

    def handle(self, order_id: str, status: str | None) -> OrderDTO:
        new_status = OrderStatus.parse(status)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order not found")

        previous = order.status
        order.change_status(new_status)
        self._order_repo.save(order, ["status"])
        logger.info("Order %s: %s -> %s", order_id, previous.value, new_status.value)

        return OrderViewAssembler(self._supplier_repo, self._product_repo).to_dto(order)
