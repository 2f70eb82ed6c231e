"""HTTP endpoints for the Product aggregate."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ims.application.add_product import AddProductHandler
from ims.application.adjust_stock import AdjustStockHandler
from ims.application.delete_product import DeleteProductHandler
from ims.application.list_products import ListProductsHandler
from ims.application.show_product import FindProductBySkuHandler, ShowProductHandler
from ims.application.update_product import UpdateProductHandler
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.repository.query import DEFAULT_PAGE_SIZE
from ims.infrastructure.api.dependencies import get_product_repository
from ims.infrastructure.api.schemas import (
    ProductCreateRequest,
    ProductUpdateRequest,
    StockAdjustRequest,
)
from ims.infrastructure.api.serializers import page_to_json, product_to_json

router = APIRouter(prefix="/products", tags=["products"])


@router.get("")
def list_products(
    search: Optional[str] = None,
    page: int = 1,
    limit: int = DEFAULT_PAGE_SIZE,
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_order: Optional[str] = Query(None, alias="sortOrder"),
    repo: ProductRepository = Depends(get_product_repository),
):
    result = ListProductsHandler(repo).handle(
        search=search, sort_by=sort_by, sort_order=sort_order, page=page, limit=limit
    )
    return page_to_json(result, product_to_json)


@router.get("/sku/{sku}")
def get_product_by_sku(sku: str, repo: ProductRepository = Depends(get_product_repository)):
    return product_to_json(FindProductBySkuHandler(repo).handle(sku))


@router.get("/{product_id}")
def get_product(product_id: str, repo: ProductRepository = Depends(get_product_repository)):
    return product_to_json(ShowProductHandler(repo).handle(product_id))


@router.post("", status_code=201)
def create_product(
    body: ProductCreateRequest,
    repo: ProductRepository = Depends(get_product_repository),
):
    product = AddProductHandler(repo).handle(
        sku=body.sku, name=body.name, price=body.price, stock=body.stock
    )
    return product_to_json(product)


@router.put("/{product_id}")
def update_product(
    product_id: str,
    body: ProductUpdateRequest,
    repo: ProductRepository = Depends(get_product_repository),
):
    product = UpdateProductHandler(repo).handle(
        product_id, sku=body.sku, name=body.name, price=body.price, stock=body.stock
    )
    return product_to_json(product)


@router.delete("/{product_id}")
def delete_product(product_id: str, repo: ProductRepository = Depends(get_product_repository)):
    DeleteProductHandler(repo).handle(product_id)
    return {"message": "Product deleted successfully"}


@router.patch("/{product_id}/stock")
def adjust_stock(
    product_id: str,
    body: StockAdjustRequest,
    repo: ProductRepository = Depends(get_product_repository),
):
    product = AdjustStockHandler(repo).handle(product_id, body.operation, body.quantity)
    return product_to_json(product)
