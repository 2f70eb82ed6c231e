"""Application service: List Suppliers use case (query)."""

from __future__ import annotations

from ims.application.dto import Page
from ims.domain.model.supplier import Supplier
from ims.domain.repository.query import DEFAULT_PAGE_SIZE, PageRequest, SortSpec
from ims.domain.repository.supplier_repository import SupplierRepository

DEFAULT_SORT = SortSpec("name")


class ListSuppliersHandler:

    def __init__(self, supplier_repo: SupplierRepository) -> None:
        self._supplier_repo = supplier_repo

    def handle(
        self,
        search: str | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> Page[Supplier]:
        paging = PageRequest(page=page, limit=limit)
        sort = SortSpec.parse(sort_by, sort_order, Supplier.SORTABLE_FIELDS, DEFAULT_SORT)
        items, total = self._supplier_repo.search(search or None, sort, paging)
        return Page(
            items=items,
            total=total,
            current_page=paging.page,
            total_pages=paging.total_pages(total),
        )
