"""
Schedule Service: production lines and task bars for one timeline window.
"""
from datetime import date
from typing import Optional

from app.core.schedule import place_tasks, shift_anchor, timeline_window
from app.database import InMemoryStore
from app.repositories.schedule_repository import ProductionLineRepository, ScheduleTaskRepository
from app.schemas.schedule import ScheduleTimelineResponse


class ScheduleService:

    def __init__(self, store: InMemoryStore):
        self._line_repo = ProductionLineRepository(store)
        self._task_repo = ScheduleTaskRepository(store)

    def get_timeline(
        self,
        anchor: Optional[date] = None,
        view_mode: str = "week",
        line_id: Optional[str] = None,
        status: Optional[str] = None,
    ) -> ScheduleTimelineResponse:
        anchor = anchor or date.today()
        start, end = timeline_window(anchor, view_mode)
        tasks = self._task_repo.list_filtered(line_id=line_id, status=status)
        lines = self._line_repo.list_all()
        if line_id:
            lines = [line for line in lines if line.id == line_id]

        return ScheduleTimelineResponse(
            view_mode=view_mode,
            anchor=anchor,
            window_start=start,
            window_end=end,
            total_days=(end - start).days + 1,
            prev_anchor=shift_anchor(anchor, view_mode, -1),
            next_anchor=shift_anchor(anchor, view_mode, 1),
            lines=[line.model_dump() for line in lines],
            placements=[
                {"task": p.task.model_dump(), "offset_days": p.offset_days, "duration_days": p.duration_days}
                for p in place_tasks(tasks, start, end)
            ],
        )
