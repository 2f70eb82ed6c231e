"""Supplier aggregate and its contact details."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ims.domain.exceptions import ValidationError
from ims.domain.model.value_objects import EmailAddress


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _clean(value: str | None) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"Expected a string, got {type(value).__name__}")
    return value.strip()


@dataclass(frozen=True)
class Contact:
    email: str
    phone: str = ""
    address: str = ""

    @staticmethod
    def of(email: str, phone: str | None = None, address: str | None = None) -> Contact:
        return Contact(
            email=EmailAddress(email).value,
            phone=_clean(phone),
            address=_clean(address),
        )

    def merge(
        self,
        email: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> Contact:
        """Return a copy with only the supplied parts replaced."""
        return Contact(
            email=EmailAddress(email).value if email is not None else self.email,
            phone=_clean(phone) if phone is not None else self.phone,
            address=_clean(address) if address is not None else self.address,
        )


@dataclass
class Supplier:
    """A company purchase orders are placed with.

    ``contact.email`` is unique across suppliers; the repository enforces it.
    """

    id: str | None
    name: str
    contact: Contact
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    SORTABLE_FIELDS = {
        "name": "name",
        "contact.email": "contact.email",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
    }

    @staticmethod
    def create(name: str, contact: Contact) -> Supplier:
        supplier = Supplier(id=None, name="", contact=contact)
        supplier.rename(name)
        return supplier

    def rename(self, name: str) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Supplier name is required")
        self.name = name.strip()
