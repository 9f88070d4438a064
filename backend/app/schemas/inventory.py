from pydantic import BaseModel, Field
from typing import Optional, List, Dict

from app.models.enums import InventoryStatus


class InventoryItemBase(BaseModel):
    sku: Optional[str] = None
    name: Optional[str] = None
    category: Optional[str] = None
    stock: Optional[float] = Field(None, ge=0)
    allocated: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = None
    max_stock: Optional[float] = Field(None, ge=0)
    value: Optional[float] = Field(None, ge=0)


class InventoryItemCreate(InventoryItemBase):
    pass


class InventoryItemUpdate(InventoryItemBase):
    pass


class InventoryItemResponse(BaseModel):
    id: str
    sku: str
    name: str
    category: str
    stock: float
    allocated: float
    unit: str
    max_stock: float
    value: float
    status: InventoryStatus

    class Config:
        from_attributes = True


class InventoryListResponse(BaseModel):
    items: List[InventoryItemResponse]
    total: int
    page: int
    page_size: int
    total_pages: int


class StockEditRow(BaseModel):
    id: str
    new_stock: float


class BulkStockUpdateRequest(BaseModel):
    edits: List[StockEditRow] = Field(..., min_length=1)


class BulkStockValidationResponse(BaseModel):
    valid: bool
    invalid_rows: List[Dict] = Field(default_factory=list)


class InventorySummaryResponse(BaseModel):
    item_count: int
    total_value: float
    low_stock_count: int
    status_counts: Dict[str, int]
