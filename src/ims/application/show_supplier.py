"""Application service: Show Supplier use case (query)."""

from __future__ import annotations

from ims.domain.exceptions import EntityNotFoundError
from ims.domain.model.supplier import Supplier
from ims.domain.repository.supplier_repository import SupplierRepository


class ShowSupplierHandler:

    def __init__(self, supplier_repo: SupplierRepository) -> None:
        self._supplier_repo = supplier_repo

    def handle(self, supplier_id: str) -> Supplier:
        supplier = self._supplier_repo.get_by_id(supplier_id)
        if supplier is None:
            raise EntityNotFoundError("Supplier not found")
        return supplier
