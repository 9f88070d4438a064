from datetime import date

from pydantic import BaseModel, Field

from app.models.enums import OrderStatus


class PurchaseOrder(BaseModel):
    id: str
    customer: str
    product: str
    sku: str
    total_qty: int = Field(..., ge=0)
    fulfilled_qty: int = Field(0, ge=0)
    status: OrderStatus = OrderStatus.PENDING
    progress: int = Field(0, ge=0, le=100)
    due_date: date
