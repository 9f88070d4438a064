"""
Schedule Router
"""
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.database import InMemoryStore, get_store
from app.schemas.schedule import ScheduleTimelineResponse
from app.services.schedule_service import ScheduleService

router = APIRouter(prefix="/schedule", tags=["Schedule"])


def get_schedule_service(store: InMemoryStore = Depends(get_store)) -> ScheduleService:
    return ScheduleService(store)


@router.get("/timeline", response_model=ScheduleTimelineResponse)
def get_timeline(
    anchor: Optional[date] = None,
    view_mode: str = Query("week", description="week or month"),
    line_id: Optional[str] = None,
    status: Optional[str] = None,
    service: ScheduleService = Depends(get_schedule_service),
):
    return service.get_timeline(anchor=anchor, view_mode=view_mode, line_id=line_id, status=status)
