from pydantic import BaseModel, Field, computed_field

from app.core.status import derive_inventory_status
from app.models.enums import InventoryStatus


class InventoryItem(BaseModel):
    id: str
    sku: str
    name: str
    category: str = "General"
    stock: float = Field(0, ge=0)
    allocated: float = Field(0, ge=0)
    unit: str = "pcs"
    max_stock: float = Field(100, gt=0)
    value: float = Field(0, ge=0)

    # Always recomputed from stock / max_stock; there is no stored copy to go stale.
    @computed_field
    @property
    def status(self) -> InventoryStatus:
        return derive_inventory_status(self.stock, self.max_stock)
