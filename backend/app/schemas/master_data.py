from datetime import date
from typing import Optional, List

from pydantic import BaseModel, Field

from app.models.product import (
    BOMItemDefinition,
    CustomField,
    InspectionChecklistItem,
    ProcessStageDefinition,
    ProductDefinition,
)


class ProductSummaryResponse(BaseModel):
    id: str
    sku: str
    name: str
    version: str
    category: Optional[str] = None
    bom_count: int
    stage_count: int
    checklist_count: int
    last_modified: date


class EditSessionCreateRequest(BaseModel):
    product_id: Optional[str] = None


class EditSessionResponse(BaseModel):
    session_id: str
    product_id: str
    is_new: bool
    draft: ProductDefinition


class DraftUpdateRequest(BaseModel):
    sku: Optional[str] = Field(None, min_length=1)
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    version: Optional[str] = None
    category: Optional[str] = None
    bom: Optional[List[BOMItemDefinition]] = None
    stages: Optional[List[ProcessStageDefinition]] = None
    checklist: Optional[List[InspectionChecklistItem]] = None
    custom_fields: Optional[List[CustomField]] = None


class BOMItemChangeRequest(BaseModel):
    inventory_item_id: str


class StageAddRequest(BaseModel):
    name: str = "New Stage"


class ParameterAddRequest(BaseModel):
    name: str = "Param"
    target_value: str = ""


class ChecklistItemAddRequest(BaseModel):
    label: str = ""
    category: str = "Visual"


class ChecklistImportRequest(BaseModel):
    source_product_id: str


class CategoriesResponse(BaseModel):
    categories: List[str]


class SpecsResponse(BaseModel):
    product_id: str
    text: str
