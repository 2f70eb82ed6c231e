"""Abstract repository for Supplier aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ims.domain.model.supplier import Supplier
from ims.domain.repository.query import PageRequest, SortSpec


class SupplierRepository(ABC):

    @abstractmethod
    def get_by_id(self, supplier_id: str) -> Supplier | None:
        """Return a supplier by its ID, or None if not found."""

    @abstractmethod
    def get_by_email(self, email: str) -> Supplier | None:
        """Return the supplier whose normalized contact email matches, or None."""

    @abstractmethod
    def search(
        self, text: str | None, sort: SortSpec, page: PageRequest
    ) -> tuple[list[Supplier], int]:
        """Return one page of suppliers matching ``text`` on name or email."""

    @abstractmethod
    def add(self, supplier: Supplier) -> None:
        """Insert a new supplier and assign its ID (ConflictError on duplicate email)."""

    @abstractmethod
    def save(self, supplier: Supplier) -> None:
        """Persist an updated supplier (ConflictError on duplicate email)."""

    @abstractmethod
    def delete(self, supplier_id: str) -> bool:
        """Remove a supplier. Return False if it did not exist."""
