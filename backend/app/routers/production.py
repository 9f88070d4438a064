"""
Production Router: batches and their stage transitions.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends

from app.database import InMemoryStore, get_store
from app.schemas.production import (
    BatchCreateRequest,
    ProductionBatchResponse,
    StageTimestampUpdateRequest,
)
from app.services.production_service import ProductionService

router = APIRouter(prefix="/production", tags=["Production"])


def get_production_service(store: InMemoryStore = Depends(get_store)) -> ProductionService:
    return ProductionService(store)


@router.get("/batches", response_model=List[ProductionBatchResponse])
def list_batches(
    po_id: Optional[str] = None,
    status: Optional[str] = None,
    service: ProductionService = Depends(get_production_service),
):
    return service.list_batches(po_id=po_id, status=status)


@router.post("/batches", response_model=ProductionBatchResponse, status_code=201)
def create_batch(
    body: BatchCreateRequest,
    service: ProductionService = Depends(get_production_service),
):
    return service.create_batch(body)


@router.get("/batches/{batch_id}", response_model=ProductionBatchResponse)
def get_batch(batch_id: str, service: ProductionService = Depends(get_production_service)):
    return service.get_batch(batch_id)


@router.post("/batches/{batch_id}/stages/{stage_id}/advance", response_model=ProductionBatchResponse)
def advance_stage(
    batch_id: str,
    stage_id: str,
    service: ProductionService = Depends(get_production_service),
):
    return service.advance_stage(batch_id, stage_id)


@router.post("/batches/{batch_id}/stages/{stage_id}/revert", response_model=ProductionBatchResponse)
def revert_stage(
    batch_id: str,
    stage_id: str,
    service: ProductionService = Depends(get_production_service),
):
    return service.revert_stage(batch_id, stage_id)


@router.patch("/batches/{batch_id}/stages/{stage_id}/completed-at", response_model=ProductionBatchResponse)
def set_stage_timestamp(
    batch_id: str,
    stage_id: str,
    body: StageTimestampUpdateRequest,
    service: ProductionService = Depends(get_production_service),
):
    return service.set_stage_timestamp(batch_id, stage_id, body)


@router.post("/batches/{batch_id}/hold", response_model=ProductionBatchResponse)
def hold_batch(batch_id: str, service: ProductionService = Depends(get_production_service)):
    return service.hold_batch(batch_id)


@router.post("/batches/{batch_id}/resume", response_model=ProductionBatchResponse)
def resume_batch(batch_id: str, service: ProductionService = Depends(get_production_service)):
    return service.resume_batch(batch_id)
