from datetime import date
from typing import List

from pydantic import BaseModel

from app.models.enums import OrderStatus
from app.schemas.production import ProductionBatchResponse


class PurchaseOrderResponse(BaseModel):
    id: str
    customer: str
    product: str
    sku: str
    total_qty: int
    fulfilled_qty: int
    status: OrderStatus
    progress: int
    due_date: date

    class Config:
        from_attributes = True


class MaterialRequirementResponse(BaseModel):
    inventory_item_id: str
    name: str
    unit: str
    required: float
    available: float
    shortage: float

    class Config:
        from_attributes = True


class PurchaseOrderDetailResponse(BaseModel):
    order: PurchaseOrderResponse
    planned_qty: int
    available_qty: int
    batches: List[ProductionBatchResponse]
    materials: List[MaterialRequirementResponse]
    has_shortage: bool
