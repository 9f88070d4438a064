"""
Inventory Router: Thin Controller (SRP / DIP)
"""
from fastapi import APIRouter, Depends, Query, Response
from typing import List, Optional

from app.database import InMemoryStore, get_store
from app.schemas.inventory import (
    BulkStockUpdateRequest,
    BulkStockValidationResponse,
    InventoryItemCreate,
    InventoryItemResponse,
    InventoryItemUpdate,
    InventoryListResponse,
    InventorySummaryResponse,
)
from app.services.inventory_service import InventoryService

router = APIRouter(prefix="/inventory", tags=["Inventory"])


def get_inventory_service(store: InMemoryStore = Depends(get_store)) -> InventoryService:
    return InventoryService(store)


@router.get("", response_model=InventoryListResponse)
def list_inventory(
    page: int = Query(1, ge=1),
    page_size: int = Query(50, ge=1, le=200),
    status: Optional[str] = Query(None, description="OK, Low, Critical or All"),
    search: Optional[str] = None,
    category: Optional[str] = None,
    service: InventoryService = Depends(get_inventory_service),
):
    return service.list_items(
        page=page, page_size=page_size,
        status=status, search=search, category=category,
    )


@router.get("/summary", response_model=InventorySummaryResponse)
def inventory_summary(service: InventoryService = Depends(get_inventory_service)):
    return service.get_summary()


@router.get("/bulk-candidates", response_model=List[InventoryItemResponse])
def bulk_edit_candidates(
    selected: Optional[List[str]] = Query(None),
    search: Optional[str] = None,
    service: InventoryService = Depends(get_inventory_service),
):
    return service.bulk_candidates(selected or [], search)


@router.post("/bulk-update/validate", response_model=BulkStockValidationResponse)
def validate_bulk_update(
    body: BulkStockUpdateRequest,
    service: InventoryService = Depends(get_inventory_service),
):
    return service.validate_bulk_update(body)


@router.post("/bulk-update", response_model=List[InventoryItemResponse])
def bulk_update_stock(
    body: BulkStockUpdateRequest,
    service: InventoryService = Depends(get_inventory_service),
):
    return service.bulk_update_stock(body)


@router.get("/{item_id}", response_model=InventoryItemResponse)
def get_inventory_item(item_id: str, service: InventoryService = Depends(get_inventory_service)):
    return service.get_item(item_id)


@router.post("", response_model=InventoryItemResponse, status_code=201)
def create_inventory_item(
    body: InventoryItemCreate,
    service: InventoryService = Depends(get_inventory_service),
):
    return service.add_item(body)


@router.put("/{item_id}", response_model=InventoryItemResponse)
def update_inventory_item(
    item_id: str,
    body: InventoryItemUpdate,
    service: InventoryService = Depends(get_inventory_service),
):
    return service.edit_item(item_id, body)


@router.delete("/{item_id}", status_code=204)
def delete_inventory_item(item_id: str, service: InventoryService = Depends(get_inventory_service)):
    service.delete_item(item_id)
    return Response(status_code=204)
