"""Application service: Show Order use case (query)."""

from __future__ import annotations

from ims.application.dto import OrderDTO
from ims.application.order_view import OrderViewAssembler
from ims.domain.exceptions import EntityNotFoundError
from ims.domain.repository.order_repository import OrderRepository
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.repository.supplier_repository import SupplierRepository


class ShowOrderHandler:

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
        return OrderViewAssembler(self._supplier_repo, self._product_repo).to_dto(order)
