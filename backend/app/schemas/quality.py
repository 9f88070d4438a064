import datetime
from typing import Optional, List, Dict

from pydantic import BaseModel, Field

from app.models.enums import ChecklistItemStatus, InspectionStatus


class InspectionItemPayload(BaseModel):
    id: str
    label: str
    category: str = "Visual"
    status: ChecklistItemStatus = ChecklistItemStatus.PENDING
    notes: Optional[str] = None

    class Config:
        from_attributes = True


class ScorePreviewRequest(BaseModel):
    items: List[InspectionItemPayload]


class ScoreResponse(BaseModel):
    score: int
    status: InspectionStatus
    passed: int
    failed: int
    pending: int
    not_applicable: int
    scored: int

    class Config:
        from_attributes = True


class InspectionSubmitRequest(BaseModel):
    batch_id: str
    inspector: str = Field("Current User", min_length=1)
    date: Optional[datetime.date] = None
    items: Optional[List[InspectionItemPayload]] = None
    overall_notes: Optional[str] = Field(None, max_length=2000)
    images: int = Field(0, ge=0)


class InspectionDraftResponse(BaseModel):
    batch_id: str
    product: str
    sku: str
    inspector: str
    date: datetime.date
    items: List[InspectionItemPayload]
    score: int
    status: InspectionStatus


class InspectionResponse(BaseModel):
    id: str
    batch_id: str
    product: str
    sku: str
    inspector: str
    date: datetime.date
    status: InspectionStatus
    score: int
    items: List[InspectionItemPayload]
    overall_notes: Optional[str] = None
    images: int = 0

    class Config:
        from_attributes = True


class InspectionDetailResponse(InspectionResponse):
    groups: Dict[str, List[InspectionItemPayload]] = Field(default_factory=dict)
