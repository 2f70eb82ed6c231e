"""Application service: Delete Product use case.

Orders that reference the product are left alone; they resolve the
missing product as ``None`` when read.
"""

from __future__ import annotations

import logging

from ims.domain.exceptions import EntityNotFoundError
from ims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        if not self._product_repo.delete(product_id):
            raise EntityNotFoundError("Product not found")
        logger.info("Deleted product %s", product_id)
