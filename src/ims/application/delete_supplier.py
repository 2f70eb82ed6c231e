"""Application service: Delete Supplier use case.

Not blocked by orders placed with the supplier; those orders show a
``None`` supplier summary from then on.
"""

from __future__ import annotations

import logging

from ims.domain.exceptions import EntityNotFoundError
from ims.domain.repository.supplier_repository import SupplierRepository

logger = logging.getLogger(__name__)


class DeleteSupplierHandler:

    def __init__(self, supplier_repo: SupplierRepository) -> None:
        self._supplier_repo = supplier_repo

    def handle(self, supplier_id: str) -> None:
        if not self._supplier_repo.delete(supplier_id):
            raise EntityNotFoundError("Supplier not found")
        logger.info("Deleted supplier %s", supplier_id)
