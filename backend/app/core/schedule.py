"""
Timeline window bounds and task placement for the schedule view.
"""
from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional, Sequence, Tuple

from dateutil.relativedelta import relativedelta, MO, SU

from app.core.exceptions import ValidationException
from app.models.schedule import ScheduleTask

VIEW_MODES = ("week", "month")


@dataclass(frozen=True)
class TaskPlacement:
    task: ScheduleTask
    offset_days: int
    duration_days: int


def timeline_window(anchor: date, view_mode: str = "week") -> Tuple[date, date]:
    """Inclusive bounds: Monday..Sunday around ``anchor``, or its calendar month."""
    if view_mode == "week":
        return anchor + relativedelta(weekday=MO(-1)), anchor + relativedelta(weekday=SU(+1))
    if view_mode == "month":
        start = anchor.replace(day=1)
        return start, start + relativedelta(months=1, days=-1)
    raise ValidationException(f"Unknown view mode '{view_mode}'.", details={"allowed": list(VIEW_MODES)})


def shift_anchor(anchor: date, view_mode: str, step: int) -> date:
    """Move one window back (``step=-1``) or forward (``step=1``)."""
    if view_mode == "week":
        return anchor + relativedelta(weeks=step)
    start, end = timeline_window(anchor, view_mode)
    return start - timedelta(days=1) if step < 0 else end + timedelta(days=1)


def place_task(task: ScheduleTask, window_start: date, window_end: date) -> Optional[TaskPlacement]:
    if task.end_date < window_start or task.start_date > window_end:
        return None
    start = max(task.start_date, window_start)
    end = min(task.end_date, window_end)
    return TaskPlacement(
        task=task,
        offset_days=(start - window_start).days,
        duration_days=(end - start).days + 1,
    )


def place_tasks(tasks: Sequence[ScheduleTask], window_start: date, window_end: date) -> List[TaskPlacement]:
    placements = (place_task(t, window_start, window_end) for t in tasks)
    return [p for p in placements if p is not None]
