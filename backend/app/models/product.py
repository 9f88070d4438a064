from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field


class StageParameter(BaseModel):
    id: str
    name: str
    target_value: str = ""


class ProcessStageDefinition(BaseModel):
    id: str
    name: str
    description: str = ""
    order: int = Field(1, ge=1)
    parameters: List[StageParameter] = Field(default_factory=list)


class BOMItemDefinition(BaseModel):
    id: str
    inventory_item_id: str
    # Cached for display; refreshed whenever inventory_item_id changes.
    inventory_item_name: str = ""
    quantity: float = Field(1, gt=0)
    unit: str = ""


class InspectionChecklistItem(BaseModel):
    id: str
    label: str = ""
    category: str = "Visual"


class CustomField(BaseModel):
    key: str = ""
    value: str = ""


class ProductDefinition(BaseModel):
    id: str
    sku: str
    name: str
    description: str = ""
    version: str = "1.0"
    bom: List[BOMItemDefinition] = Field(default_factory=list)
    stages: List[ProcessStageDefinition] = Field(default_factory=list)
    checklist: List[InspectionChecklistItem] = Field(default_factory=list)
    custom_fields: List[CustomField] = Field(default_factory=list)
    category: Optional[str] = None
    last_modified: date
