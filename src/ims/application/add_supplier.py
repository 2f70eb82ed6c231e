"""Application service: Add Supplier use case."""

from __future__ import annotations

import logging

from ims.domain.exceptions import ConflictError, ValidationError
from ims.domain.model.supplier import Contact, Supplier
from ims.domain.repository.supplier_repository import SupplierRepository

logger = logging.getLogger(__name__)


class AddSupplierHandler:

    def __init__(self, supplier_repo: SupplierRepository) -> None:
        self._supplier_repo = supplier_repo

    def handle(
        self,
        name: str | None,
        email: str | None,
        phone: str | None = None,
        address: str | None = None,
    ) -> Supplier:
        """Register a supplier; the contact email must not be in use."""
        if not name or not email:
            raise ValidationError("Name and contact email are required")

        supplier = Supplier.create(name, Contact.of(email, phone, address))

        if self._supplier_repo.get_by_email(supplier.contact.email) is not None:
            raise ConflictError("Supplier with this email already exists")

        self._supplier_repo.add(supplier)
        logger.info("Added supplier %s (%s)", supplier.name, supplier.id)
        return supplier
