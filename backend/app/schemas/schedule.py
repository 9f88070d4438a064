from datetime import date
from typing import List

from pydantic import BaseModel

from app.models.schedule import ProductionLine, ScheduleTask


class TaskPlacementResponse(BaseModel):
    task: ScheduleTask
    offset_days: int
    duration_days: int

    class Config:
        from_attributes = True


class ScheduleTimelineResponse(BaseModel):
    view_mode: str
    anchor: date
    window_start: date
    window_end: date
    total_days: int
    prev_anchor: date
    next_anchor: date
    lines: List[ProductionLine]
    placements: List[TaskPlacementResponse]
