"""HTTP endpoints for the Order aggregate and its lifecycle."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ims.application.create_order import CreateOrderHandler
from ims.application.delete_order import DeleteOrderHandler
from ims.application.dto import OrderItemSpec
from ims.application.list_orders import ListOrdersHandler
from ims.application.process_order import ProcessOrderHandler
from ims.application.show_order import ShowOrderHandler
from ims.application.update_order import UpdateOrderHandler
from ims.application.update_order_status import UpdateOrderStatusHandler
from ims.domain.repository.order_repository import OrderRepository
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.repository.query import DEFAULT_PAGE_SIZE
from ims.domain.repository.supplier_repository import SupplierRepository
from ims.infrastructure.api.dependencies import (
    get_order_repository,
    get_product_repository,
    get_supplier_repository,
)
from ims.infrastructure.api.schemas import (
    OrderCreateRequest,
    OrderItemRequest,
    OrderStatusRequest,
    OrderUpdateRequest,
)
from ims.infrastructure.api.serializers import order_to_json, page_to_json

router = APIRouter(prefix="/orders", tags=["orders"])


class Repositories:
    """Bundles the three repositories every order handler needs."""

    def __init__(
        self,
        orders: OrderRepository = Depends(get_order_repository),
        products: ProductRepository = Depends(get_product_repository),
        suppliers: SupplierRepository = Depends(get_supplier_repository),
    ) -> None:
        self.orders = orders
        self.products = products
        self.suppliers = suppliers

    def handler(self, handler_cls):
        return handler_cls(self.orders, self.products, self.suppliers)


def _item_specs(items: list[OrderItemRequest] | None) -> list[OrderItemSpec] | None:
    if items is None:
        return None
    return [OrderItemSpec(product_id=i.product_id, qty=i.qty, price=i.price) for i in items]


@router.get("")
def list_orders(
    status: Optional[str] = None,
    supplier_id: Optional[str] = Query(None, alias="supplierId"),
    page: int = 1,
    limit: int = DEFAULT_PAGE_SIZE,
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_order: Optional[str] = Query(None, alias="sortOrder"),
    repos: Repositories = Depends(),
):
    result = repos.handler(ListOrdersHandler).handle(
        status=status,
        supplier_id=supplier_id,
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        limit=limit,
    )
    return page_to_json(result, order_to_json)


@router.get("/{order_id}")
def get_order(order_id: str, repos: Repositories = Depends()):
    return order_to_json(repos.handler(ShowOrderHandler).handle(order_id))


@router.post("", status_code=201)
def create_order(body: OrderCreateRequest, repos: Repositories = Depends()):
    dto = repos.handler(CreateOrderHandler).handle(
        supplier_id=body.supplier_id, item_specs=_item_specs(body.items)
    )
    return order_to_json(dto)


@router.put("/{order_id}")
def update_order(order_id: str, body: OrderUpdateRequest, repos: Repositories = Depends()):
    dto = repos.handler(UpdateOrderHandler).handle(
        order_id,
        item_specs=_item_specs(body.items),
        supplier_id=body.supplier_id,
        status=body.status,
    )
    return order_to_json(dto)


@router.delete("/{order_id}")
def delete_order(order_id: str, orders: OrderRepository = Depends(get_order_repository)):
    DeleteOrderHandler(orders).handle(order_id)
    return {"message": "Order deleted successfully"}


@router.patch("/{order_id}/status")
def update_order_status(order_id: str, body: OrderStatusRequest, repos: Repositories = Depends()):
    dto = repos.handler(UpdateOrderStatusHandler).handle(order_id, body.status)
    return order_to_json(dto)


@router.post("/{order_id}/process")
def process_order(order_id: str, repos: Repositories = Depends()):
    dto = repos.handler(ProcessOrderHandler).handle(order_id)
    return {
        "message": "Order processed successfully. Stock updated.",
        "order": order_to_json(dto),
    }
