"""
Master Data Router: product templates and staged edit sessions.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Response

from app.database import InMemoryStore, get_store
from app.models.product import (
    BOMItemDefinition,
    InspectionChecklistItem,
    ProcessStageDefinition,
    ProductDefinition,
    StageParameter,
)
from app.schemas.master_data import (
    BOMItemChangeRequest,
    CategoriesResponse,
    ChecklistImportRequest,
    ChecklistItemAddRequest,
    DraftUpdateRequest,
    EditSessionCreateRequest,
    EditSessionResponse,
    ParameterAddRequest,
    ProductSummaryResponse,
    SpecsResponse,
    StageAddRequest,
)
from app.services.master_data_service import MasterDataService, session_response

router = APIRouter(prefix="/master-data", tags=["Master Data"])


def get_master_data_service(store: InMemoryStore = Depends(get_store)) -> MasterDataService:
    return MasterDataService(store)


# ── Products ──────────────────────────────────────────────────────────────────

@router.get("/products", response_model=List[ProductSummaryResponse])
def list_products(service: MasterDataService = Depends(get_master_data_service)):
    return service.list_products()


@router.get("/products/{product_id}", response_model=ProductDefinition)
def get_product(product_id: str, service: MasterDataService = Depends(get_master_data_service)):
    return service.get_product(product_id)


@router.get("/products/{product_id}/specs", response_model=SpecsResponse)
def get_product_specs(product_id: str, service: MasterDataService = Depends(get_master_data_service)):
    return SpecsResponse(product_id=product_id, text=service.get_specs(product_id))


@router.get("/categories", response_model=CategoriesResponse)
def list_categories(service: MasterDataService = Depends(get_master_data_service)):
    return CategoriesResponse(categories=service.list_categories())


# ── Edit sessions ─────────────────────────────────────────────────────────────

@router.post("/sessions", response_model=EditSessionResponse, status_code=201)
def open_session(
    body: EditSessionCreateRequest,
    service: MasterDataService = Depends(get_master_data_service),
):
    return session_response(service.open_session(body.product_id))


@router.get("/sessions/{session_id}", response_model=EditSessionResponse)
def get_session(session_id: str, service: MasterDataService = Depends(get_master_data_service)):
    return session_response(service.get_session(session_id))


@router.patch("/sessions/{session_id}", response_model=ProductDefinition)
def update_draft(
    session_id: str,
    body: DraftUpdateRequest,
    service: MasterDataService = Depends(get_master_data_service),
):
    return service.update_draft(session_id, body)


@router.delete("/sessions/{session_id}", status_code=204)
def discard_session(session_id: str, service: MasterDataService = Depends(get_master_data_service)):
    service.discard_session(session_id)
    return Response(status_code=204)


@router.post("/sessions/{session_id}/commit", response_model=ProductDefinition)
def commit_session(session_id: str, service: MasterDataService = Depends(get_master_data_service)):
    return service.commit_session(session_id)


@router.get("/sessions/{session_id}/specs", response_model=SpecsResponse)
def get_session_specs(session_id: str, service: MasterDataService = Depends(get_master_data_service)):
    session = service.get_session(session_id)
    return SpecsResponse(product_id=session.product_id, text=service.session_specs(session_id))


@router.get("/sessions/{session_id}/categories", response_model=CategoriesResponse)
def get_session_categories(
    session_id: str,
    exclude_item_id: Optional[str] = None,
    service: MasterDataService = Depends(get_master_data_service),
):
    return CategoriesResponse(categories=service.session_categories(session_id, exclude_item_id))


@router.post("/sessions/{session_id}/bom", response_model=BOMItemDefinition, status_code=201)
def add_bom_line(session_id: str, service: MasterDataService = Depends(get_master_data_service)):
    return service.add_bom_line(session_id)


@router.put("/sessions/{session_id}/bom/{line_id}", response_model=BOMItemDefinition)
def change_bom_item(
    session_id: str,
    line_id: str,
    body: BOMItemChangeRequest,
    service: MasterDataService = Depends(get_master_data_service),
):
    return service.change_bom_item(session_id, line_id, body)


@router.delete("/sessions/{session_id}/bom/{line_id}", status_code=204)
def remove_bom_line(session_id: str, line_id: str, service: MasterDataService = Depends(get_master_data_service)):
    service.remove_bom_line(session_id, line_id)
    return Response(status_code=204)


@router.post("/sessions/{session_id}/stages", response_model=ProcessStageDefinition, status_code=201)
def add_stage(
    session_id: str,
    body: StageAddRequest,
    service: MasterDataService = Depends(get_master_data_service),
):
    return service.add_stage(session_id, body)


@router.delete("/sessions/{session_id}/stages/{stage_id}", status_code=204)
def remove_stage(session_id: str, stage_id: str, service: MasterDataService = Depends(get_master_data_service)):
    service.remove_stage(session_id, stage_id)
    return Response(status_code=204)


@router.post(
    "/sessions/{session_id}/stages/{stage_id}/parameters",
    response_model=StageParameter,
    status_code=201,
)
def add_parameter(
    session_id: str,
    stage_id: str,
    body: ParameterAddRequest,
    service: MasterDataService = Depends(get_master_data_service),
):
    return service.add_parameter(session_id, stage_id, body)


@router.post("/sessions/{session_id}/checklist", response_model=InspectionChecklistItem, status_code=201)
def add_checklist_item(
    session_id: str,
    body: ChecklistItemAddRequest,
    service: MasterDataService = Depends(get_master_data_service),
):
    return service.add_checklist_item(session_id, body)


@router.delete("/sessions/{session_id}/checklist/{item_id}", status_code=204)
def remove_checklist_item(
    session_id: str,
    item_id: str,
    service: MasterDataService = Depends(get_master_data_service),
):
    service.remove_checklist_item(session_id, item_id)
    return Response(status_code=204)


@router.post("/sessions/{session_id}/checklist/import", response_model=List[InspectionChecklistItem])
def import_checklist(
    session_id: str,
    body: ChecklistImportRequest,
    service: MasterDataService = Depends(get_master_data_service),
):
    return service.import_checklist(session_id, body)
