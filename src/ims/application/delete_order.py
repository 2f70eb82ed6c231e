"""Application service: Delete Order use case.

Deletion is unconditional: stock already credited by ``process`` stays.
"""

from __future__ import annotations

import logging

from ims.domain.exceptions import EntityNotFoundError
from ims.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class DeleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> None:
        if not self._order_repo.delete(order_id):
            raise EntityNotFoundError("Order not found")
        logger.info("Deleted order %s", order_id)
