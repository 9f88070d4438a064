import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from app.models.enums import ChecklistItemStatus, InspectionStatus


class InspectionItem(BaseModel):
    id: str
    label: str
    category: str = "Visual"
    status: ChecklistItemStatus = ChecklistItemStatus.PENDING
    notes: Optional[str] = None


class Inspection(BaseModel):
    id: str
    batch_id: str
    product: str
    sku: str
    inspector: str
    date: datetime.date
    status: InspectionStatus
    score: int = Field(..., ge=0, le=100)
    items: List[InspectionItem] = Field(default_factory=list)
    overall_notes: Optional[str] = None
    images: int = Field(0, ge=0)
