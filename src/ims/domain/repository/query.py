"""Paging and sorting parameters shared by every repository ``search``."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ims.domain.exceptions import ValidationError

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class PageRequest:
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValidationError("page must be at least 1")
        if not 1 <= self.limit <= MAX_PAGE_SIZE:
            raise ValidationError(f"limit must be between 1 and {MAX_PAGE_SIZE}")

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    def total_pages(self, total: int) -> int:
        return math.ceil(total / self.limit)


@dataclass(frozen=True)
class SortSpec:
    """Sort on a wire field name (e.g. ``createdAt``)."""

    field: str
    descending: bool = False

    @staticmethod
    def parse(
        field: str | None,
        order: str | None,
        allowed: dict[str, str],
        default: SortSpec,
    ) -> SortSpec:
        """Validate user-supplied ``sortBy`` / ``sortOrder`` against ``allowed``."""
        name = field or default.field
        if name not in allowed:
            raise ValidationError(
                f"Cannot sort by '{name}'. Use one of: {', '.join(allowed)}"
            )
        if order is None:
            descending = default.descending if name == default.field else False
        elif order.lower() in ("asc", "desc"):
            descending = order.lower() == "desc"
        else:
            raise ValidationError("sortOrder must be 'asc' or 'desc'")
        return SortSpec(field=name, descending=descending)
