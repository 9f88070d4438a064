"""
Dashboard Router
"""
from fastapi import APIRouter, Depends

from app.database import InMemoryStore, get_store
from app.schemas.dashboard import DashboardSummary
from app.services.dashboard_service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


def get_dashboard_service(store: InMemoryStore = Depends(get_store)) -> DashboardService:
    return DashboardService(store)


@router.get("/summary", response_model=DashboardSummary)
def dashboard_summary(service: DashboardService = Depends(get_dashboard_service)):
    return service.get_summary()
