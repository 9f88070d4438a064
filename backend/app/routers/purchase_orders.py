"""
Purchase Orders Router
"""
from typing import List, Optional

from fastapi import APIRouter, Depends

from app.database import InMemoryStore, get_store
from app.schemas.purchase_order import PurchaseOrderDetailResponse, PurchaseOrderResponse
from app.services.purchase_order_service import PurchaseOrderService

router = APIRouter(prefix="/purchase-orders", tags=["Purchase Orders"])


def get_purchase_order_service(store: InMemoryStore = Depends(get_store)) -> PurchaseOrderService:
    return PurchaseOrderService(store)


@router.get("", response_model=List[PurchaseOrderResponse])
def list_purchase_orders(
    status: Optional[str] = None,
    search: Optional[str] = None,
    service: PurchaseOrderService = Depends(get_purchase_order_service),
):
    return service.list_orders(status=status, search=search)


@router.get("/{po_id}", response_model=PurchaseOrderDetailResponse)
def get_purchase_order(po_id: str, service: PurchaseOrderService = Depends(get_purchase_order_service)):
    return service.get_order_detail(po_id)
