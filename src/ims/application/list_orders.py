"""Application service: List Orders use case (query)."""

from __future__ import annotations

from ims.application.dto import OrderDTO, Page
from ims.application.order_view import OrderViewAssembler
from ims.domain.model.order import Order, OrderStatus
from ims.domain.repository.order_repository import OrderRepository
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.repository.query import DEFAULT_PAGE_SIZE, PageRequest, SortSpec
from ims.domain.repository.supplier_repository import SupplierRepository

DEFAULT_SORT = SortSpec("orderDate", descending=True)


class ListOrdersHandler:

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
        status: str | None = None,
        supplier_id: str | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> Page[OrderDTO]:
        paging = PageRequest(page=page, limit=limit)
        sort = SortSpec.parse(sort_by, sort_order, Order.SORTABLE_FIELDS, DEFAULT_SORT)
        status_filter = OrderStatus.parse(status) if status else None

        orders, total = self._order_repo.search(
            status_filter, supplier_id or None, sort, paging
        )
        assembler = OrderViewAssembler(self._supplier_repo, self._product_repo)
        return Page(
            items=assembler.to_dtos(orders),
            total=total,
            current_page=paging.page,
            total_pages=paging.total_pages(total),
        )
