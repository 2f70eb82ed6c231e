"""Application service: Update Supplier use case."""

from __future__ import annotations

from ims.domain.exceptions import ConflictError, EntityNotFoundError
from ims.domain.model.supplier import Supplier
from ims.domain.repository.supplier_repository import SupplierRepository


class UpdateSupplierHandler:

    def __init__(self, supplier_repo: SupplierRepository) -> None:
        self._supplier_repo = supplier_repo

    def handle(
        self,
        supplier_id: str,
        name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> Supplier:
        """Change only the supplied fields; contact parts are merged one by one."""
        supplier = self._supplier_repo.get_by_id(supplier_id)
        if supplier is None:
            raise EntityNotFoundError("Supplier not found")

        if name is not None:
            supplier.rename(name)

        contact = supplier.contact.merge(email=email, phone=phone, address=address)
        if contact.email != supplier.contact.email:
            other = self._supplier_repo.get_by_email(contact.email)
            if other is not None and other.id != supplier.id:
                raise ConflictError("Supplier with this email already exists")
        supplier.contact = contact

        self._supplier_repo.save(supplier)
        return supplier
