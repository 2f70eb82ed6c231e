"""Maps Order aggregates to OrderDTOs, resolving supplier and product references.

References are weak: a supplier or product deleted after the order was
written resolves to ``None`` instead of failing the read.
"""

from __future__ import annotations

from ims.application.dto import (
    OrderDTO,
    OrderLineItemDTO,
    ProductSummaryDTO,
    SupplierSummaryDTO,
)
from ims.domain.model.order import Order
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.repository.supplier_repository import SupplierRepository


class OrderViewAssembler:

    def __init__(
        self,
        supplier_repo: SupplierRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._supplier_repo = supplier_repo
        self._product_repo = product_repo

    def to_dto(self, order: Order) -> OrderDTO:
        return self.to_dtos([order])[0]

    def to_dtos(self, orders: list[Order]) -> list[OrderDTO]:
        suppliers: dict[str, SupplierSummaryDTO | None] = {}
        products: dict[str, ProductSummaryDTO | None] = {}
        return [self._map(order, suppliers, products) for order in orders]

    # --- Mapping --------------------------------------------------------------

    def _map(self, order: Order, suppliers: dict, products: dict) -> OrderDTO:
        if order.supplier_id not in suppliers:
            suppliers[order.supplier_id] = self._supplier_summary(order.supplier_id)

        items = []
        for item in order.items:
            if item.product_id not in products:
                products[item.product_id] = self._product_summary(item.product_id)
            items.append(
                OrderLineItemDTO(
                    product_id=item.product_id,
                    product=products[item.product_id],
                    qty=item.quantity.value,
                    price=item.unit_price.amount,
                    line_total=item.line_total.amount,
                )
            )

        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            supplier_id=order.supplier_id,
            supplier=suppliers[order.supplier_id],
            items=items,
            status=order.status.value,
            total_amount=order.total_amount.amount,
            order_date=order.order_date,
            processed_at=order.processed_at,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )

    def _supplier_summary(self, supplier_id: str) -> SupplierSummaryDTO | None:
        supplier = self._supplier_repo.get_by_id(supplier_id)
        if supplier is None:
            return None
        return SupplierSummaryDTO(
            id=supplier.id,  # type: ignore[arg-type]
            name=supplier.name,
            email=supplier.contact.email,
        )

    def _product_summary(self, product_id: str) -> ProductSummaryDTO | None:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            return None
        return ProductSummaryDTO(
            id=product.id,  # type: ignore[arg-type]
            sku=product.sku,
            name=product.name,
            price=product.price.amount,
            stock=product.stock,
        )
