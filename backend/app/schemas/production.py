from datetime import datetime, date
from typing import Optional, List

from pydantic import BaseModel

from app.models.enums import BatchPriority, BatchStatus, StageStatus


class BatchCreateRequest(BaseModel):
    po_id: str
    quantity: int
    priority: BatchPriority = BatchPriority.NORMAL


class StageTimestampUpdateRequest(BaseModel):
    completed_at: datetime


class ProductionStageResponse(BaseModel):
    id: str
    name: str
    status: StageStatus
    assignee: str
    completed_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class BatchLogResponse(BaseModel):
    time: datetime
    message: str
    sub: str

    class Config:
        from_attributes = True


class ProductionBatchResponse(BaseModel):
    id: str
    po_id: str
    customer: str
    product: str
    sku: str
    quantity: int
    completed_qty: int
    status: BatchStatus
    priority: BatchPriority
    progress: int
    start_date: date
    stages: List[ProductionStageResponse]
    logs: List[BatchLogResponse]

    class Config:
        from_attributes = True
