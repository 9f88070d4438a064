from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field, model_validator

from app.models.enums import BatchPriority, BatchStatus, StageStatus
from app.utils.rounding import percentage


class ProductionStage(BaseModel):
    id: str
    name: str
    status: StageStatus = StageStatus.PENDING
    assignee: str = "Unassigned"
    completed_at: Optional[datetime] = None

    @model_validator(mode="after")
    def check_completed_at(self):
        if self.status == StageStatus.COMPLETED and self.completed_at is None:
            raise ValueError(f"Completed stage '{self.id}' requires completed_at.")
        if self.status != StageStatus.COMPLETED and self.completed_at is not None:
            raise ValueError(f"Stage '{self.id}' is {self.status.value}; completed_at must be empty.")
        return self


class BatchLogEntry(BaseModel):
    time: datetime
    message: str
    sub: str = "System"


class ProductionBatch(BaseModel):
    id: str
    po_id: str
    customer: str
    product: str
    sku: str
    quantity: int = Field(..., gt=0)
    completed_qty: int = Field(0, ge=0)
    status: BatchStatus = BatchStatus.PLANNED
    priority: BatchPriority = BatchPriority.NORMAL
    stages: List[ProductionStage] = Field(default_factory=list)
    start_date: date
    # Newest entry first.
    logs: List[BatchLogEntry] = Field(default_factory=list)

    @computed_field
    @property
    def progress(self) -> int:
        if not self.stages:
            return 0
        completed = len([s for s in self.stages if s.status == StageStatus.COMPLETED])
        return percentage(completed, len(self.stages))
