"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable

from ims.domain.model.order import Order, OrderStatus
from ims.domain.repository.query import PageRequest, SortSpec


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def search(
        self,
        status: OrderStatus | None,
        supplier_id: str | None,
        sort: SortSpec,
        page: PageRequest,
    ) -> tuple[list[Order], int]:
        """Return one page of orders matching the filters, plus the total count."""

    @abstractmethod
    def add(self, order: Order) -> None:
        """Insert a new order and assign its ID."""

    @abstractmethod
    def save(self, order: Order, fields: Iterable[str]) -> None:
        """Write the named attributes (``items``, ``supplier_id``, ``status``) of an existing order."""

    @abstractmethod
    def delete(self, order_id: str) -> bool:
        """Remove an order. Return False if it did not exist."""

    @abstractmethod
    def claim_for_processing(self, order_id: str, processed_at: datetime) -> bool:
        """Atomically stamp ``processed_at`` on a delivered, unprocessed order.

        Returns False if the order is missing, not delivered, or was
        already claimed by an earlier call.
        """
