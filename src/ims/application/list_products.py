"""Application service: List Products use case (query)."""

from __future__ import annotations

from ims.application.dto import Page
from ims.domain.model.product import Product
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.repository.query import DEFAULT_PAGE_SIZE, PageRequest, SortSpec

DEFAULT_SORT = SortSpec("name")


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        search: str | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> Page[Product]:
        paging = PageRequest(page=page, limit=limit)
        sort = SortSpec.parse(sort_by, sort_order, Product.SORTABLE_FIELDS, DEFAULT_SORT)
        items, total = self._product_repo.search(search or None, sort, paging)
        return Page(
            items=items,
            total=total,
            current_page=paging.page,
            total_pages=paging.total_pages(total),
        )
