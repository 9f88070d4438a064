"""
Quality Router: inspections, drafts and live score preview.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends

from app.database import InMemoryStore, get_store
from app.schemas.quality import (
    InspectionDetailResponse,
    InspectionDraftResponse,
    InspectionResponse,
    InspectionSubmitRequest,
    ScorePreviewRequest,
    ScoreResponse,
)
from app.services.quality_service import QualityService

router = APIRouter(prefix="/quality", tags=["Quality Control"])


def get_quality_service(store: InMemoryStore = Depends(get_store)) -> QualityService:
    return QualityService(store)


@router.get("/inspections", response_model=List[InspectionResponse])
def list_inspections(
    status: Optional[str] = None,
    batch_id: Optional[str] = None,
    search: Optional[str] = None,
    service: QualityService = Depends(get_quality_service),
):
    return service.list_inspections(status=status, batch_id=batch_id, search=search)


@router.get("/inspections/{inspection_id}", response_model=InspectionDetailResponse)
def get_inspection(inspection_id: str, service: QualityService = Depends(get_quality_service)):
    return service.get_inspection(inspection_id)


@router.get("/batches/{batch_id}/draft", response_model=InspectionDraftResponse)
def start_inspection(batch_id: str, service: QualityService = Depends(get_quality_service)):
    return service.start_inspection(batch_id)


@router.post("/score", response_model=ScoreResponse)
def preview_score(body: ScorePreviewRequest, service: QualityService = Depends(get_quality_service)):
    return service.preview_score(body.items)


@router.post("/inspections", response_model=InspectionResponse, status_code=201)
def submit_inspection(
    body: InspectionSubmitRequest,
    service: QualityService = Depends(get_quality_service),
):
    return service.submit_inspection(body)
