"""HTTP endpoints for the Supplier aggregate."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ims.application.add_supplier import AddSupplierHandler
from ims.application.delete_supplier import DeleteSupplierHandler
from ims.application.list_suppliers import ListSuppliersHandler
from ims.application.show_supplier import ShowSupplierHandler
from ims.application.update_supplier import UpdateSupplierHandler
from ims.domain.repository.query import DEFAULT_PAGE_SIZE
from ims.domain.repository.supplier_repository import SupplierRepository
from ims.infrastructure.api.dependencies import get_supplier_repository
from ims.infrastructure.api.schemas import ContactRequest, SupplierCreateRequest, SupplierUpdateRequest
from ims.infrastructure.api.serializers import page_to_json, supplier_to_json

router = APIRouter(prefix="/suppliers", tags=["suppliers"])


@router.get("")
def list_suppliers(
    search: Optional[str] = None,
    page: int = 1,
    limit: int = DEFAULT_PAGE_SIZE,
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_order: Optional[str] = Query(None, alias="sortOrder"),
    repo: SupplierRepository = Depends(get_supplier_repository),
):
    result = ListSuppliersHandler(repo).handle(
        search=search, sort_by=sort_by, sort_order=sort_order, page=page, limit=limit
    )
    return page_to_json(result, supplier_to_json)


@router.get("/{supplier_id}")
def get_supplier(supplier_id: str, repo: SupplierRepository = Depends(get_supplier_repository)):
    return supplier_to_json(ShowSupplierHandler(repo).handle(supplier_id))


@router.post("", status_code=201)
def create_supplier(
    body: SupplierCreateRequest,
    repo: SupplierRepository = Depends(get_supplier_repository),
):
    contact = body.contact or ContactRequest()
    supplier = AddSupplierHandler(repo).handle(
        name=body.name,
        email=contact.email,
        phone=contact.phone,
        address=contact.address,
    )
    return supplier_to_json(supplier)


@router.put("/{supplier_id}")
def update_supplier(
    supplier_id: str,
    body: SupplierUpdateRequest,
    repo: SupplierRepository = Depends(get_supplier_repository),
):
    contact = body.contact or ContactRequest()
    supplier = UpdateSupplierHandler(repo).handle(
        supplier_id,
        name=body.name,
        email=contact.email,
        phone=contact.phone,
        address=contact.address,
    )
    return supplier_to_json(supplier)


@router.delete("/{supplier_id}")
def delete_supplier(supplier_id: str, repo: SupplierRepository = Depends(get_supplier_repository)):
    DeleteSupplierHandler(repo).handle(supplier_id)
    return {"message": "Supplier deleted successfully"}
