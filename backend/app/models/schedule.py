from datetime import date
from typing import List

from pydantic import BaseModel, Field, model_validator

from app.models.enums import LineStatus, LineType, TaskStatus


class ProductionLine(BaseModel):
    id: str
    name: str
    type: LineType
    status: LineStatus = LineStatus.OPERATIONAL


class ScheduleTask(BaseModel):
    id: str
    batch_id: str
    product: str
    sku: str
    line_id: str
    start_date: date
    end_date: date
    progress: int = Field(0, ge=0, le=100)
    status: TaskStatus = TaskStatus.PLANNED
    assignees: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date.")
        return self
