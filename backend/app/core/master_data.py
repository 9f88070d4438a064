"""
Product templates read by inventory, production and quality.

Edits happen on a deep copy held by ``ProductEditSession`` and reach the
product list only through ``commit`` (replace-by-id, or append for a new
product). Discarding a session leaves the list untouched.
"""
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional, Sequence, Tuple

from app.core.exceptions import EntityNotFoundException, ValidationException
from app.models.enums import ChecklistItemStatus
from app.models.inventory import InventoryItem
from app.models.product import (
    BOMItemDefinition,
    InspectionChecklistItem,
    ProcessStageDefinition,
    ProductDefinition,
    StageParameter,
)
from app.models.quality import InspectionItem
from app.utils.ids import new_id

SEED_CATEGORIES = ("Visual", "Dimensional", "Functional", "Packaging")

EDITABLE_FIELDS = {
    "sku", "name", "description", "version", "category",
    "bom", "stages", "checklist", "custom_fields",
}


def import_checklist(
    target: Sequence[InspectionChecklistItem],
    source: Sequence[InspectionChecklistItem],
) -> List[InspectionChecklistItem]:
    """Append copies of ``source`` to ``target``; each copy gets a fresh id. No dedup by label."""
    copies = [item.model_copy(update={"id": new_id("chk-imp")}) for item in source]
    return [*target, *copies]


def available_categories(
    products: Iterable[ProductDefinition],
    editing: Iterable[InspectionChecklistItem] = (),
    exclude_item_id: Optional[str] = None,
) -> List[str]:
    """
    Checklist category vocabulary: the seed set, every committed product's
    categories and the ones in the open edit, minus the row being typed.
    """
    categories = set(SEED_CATEGORIES)
    for product in products:
        categories.update(c.category for c in product.checklist if c.category)
    categories.update(c.category for c in editing if c.category and c.id != exclude_item_id)
    return sorted(categories)


def find_product_by_sku(products: Iterable[ProductDefinition], sku: str) -> Optional[ProductDefinition]:
    return next((p for p in products if p.sku == sku), None)


def checklist_to_inspection_items(checklist: Iterable[InspectionChecklistItem]) -> List[InspectionItem]:
    return [
        InspectionItem(id=c.id, label=c.label, category=c.category, status=ChecklistItemStatus.PENDING)
        for c in checklist
    ]


def bom_line_for(inventory_item: InventoryItem, line_id: Optional[str] = None, quantity: float = 1) -> BOMItemDefinition:
    return BOMItemDefinition(
        id=line_id or new_id("bom"),
        inventory_item_id=inventory_item.id,
        inventory_item_name=inventory_item.name,
        quantity=quantity,
        unit=inventory_item.unit,
    )


def default_bom_line(
    bom: Sequence[BOMItemDefinition],
    inventory: Sequence[InventoryItem],
) -> BOMItemDefinition:
    """New BOM line on the first inventory item the product does not use yet."""
    if not inventory:
        raise ValidationException("No inventory items available for a BOM line.")
    used = {line.inventory_item_id for line in bom}
    choice = next((item for item in inventory if item.id not in used), inventory[0])
    return bom_line_for(choice)


@dataclass(frozen=True)
class MaterialRequirement:
    inventory_item_id: str
    name: str
    unit: str
    required: float
    available: float

    @property
    def shortage(self) -> float:
        return max(0.0, self.required - self.available)


def material_requirements(
    product: ProductDefinition,
    open_quantity: int,
    inventory: Sequence[InventoryItem],
) -> List[MaterialRequirement]:
    """
    BOM demand for ``open_quantity`` units against free stock (stock - allocated).

    A BOM line whose inventory item no longer exists reports zero available.
    """
    by_id = {item.id: item for item in inventory}
    rows = []
    for line in product.bom:
        item = by_id.get(line.inventory_item_id)
        rows.append(MaterialRequirement(
            inventory_item_id=line.inventory_item_id,
            name=item.name if item else line.inventory_item_name,
            unit=item.unit if item else line.unit,
            required=line.quantity * open_quantity,
            available=max(0.0, item.stock - item.allocated) if item else 0.0,
        ))
    return rows


def format_specs(product: ProductDefinition) -> str:
    lines = [
        f"Product Name: {product.name}",
        f"SKU: {product.sku}",
        f"Description: {product.description or 'N/A'}",
        "",
    ]
    if product.custom_fields:
        lines.extend(f"{f.key}: {f.value}" for f in product.custom_fields if f.key and f.value)
    else:
        lines.append("No custom specifications defined.")
    return "\n".join(lines)


def new_product(product_id: Optional[str] = None, today: Optional[date] = None) -> ProductDefinition:
    return ProductDefinition(
        id=product_id or new_id("prod"),
        sku="NEW-PROD",
        name="New Product",
        description="",
        version="1.0",
        last_modified=today or date.today(),
    )


class ProductEditSession:
    """Staged edit of one product. ``draft`` is never shared with the committed list."""

    def __init__(self, product: ProductDefinition, session_id: Optional[str] = None, is_new: bool = False):
        self.id = session_id or new_id("edit")
        self.product_id = product.id
        self.is_new = is_new
        self.draft = product.model_copy(deep=True)

    # ── Draft fields ─────────────────────────────────────────────────────

    def update(self, **fields) -> ProductDefinition:
        unknown = set(fields) - EDITABLE_FIELDS
        if unknown:
            raise ValidationException(f"Fields cannot be edited: {', '.join(sorted(unknown))}.")
        data = self.draft.model_dump()
        data.update(fields)
        self.draft = ProductDefinition.model_validate(data)
        return self.draft

    # ── BOM ──────────────────────────────────────────────────────────────

    def add_bom_line(self, inventory: Sequence[InventoryItem]) -> BOMItemDefinition:
        line = default_bom_line(self.draft.bom, inventory)
        self.draft.bom.append(line)
        return line

    def change_bom_item(self, line_id: str, inventory_item: InventoryItem) -> BOMItemDefinition:
        index = self._index(self.draft.bom, line_id, "BOMItem")
        line = self.draft.bom[index]
        self.draft.bom[index] = bom_line_for(inventory_item, line_id=line.id, quantity=line.quantity)
        return self.draft.bom[index]

    def remove_bom_line(self, line_id: str) -> None:
        self.draft.bom = [line for line in self.draft.bom if line.id != line_id]

    # ── Process stages ───────────────────────────────────────────────────

    def add_stage(self, name: str = "New Stage") -> ProcessStageDefinition:
        stage = ProcessStageDefinition(
            id=new_id("st"), name=name, description="", order=len(self.draft.stages) + 1,
        )
        self.draft.stages.append(stage)
        return stage

    def remove_stage(self, stage_id: str) -> None:
        self.draft.stages = [s for s in self.draft.stages if s.id != stage_id]

    def add_parameter(self, stage_id: str, name: str = "Param", target_value: str = "") -> StageParameter:
        stage = self.draft.stages[self._index(self.draft.stages, stage_id, "ProcessStage")]
        parameter = StageParameter(id=new_id("p"), name=name, target_value=target_value)
        stage.parameters.append(parameter)
        return parameter

    # ── Checklist ────────────────────────────────────────────────────────

    def add_checklist_item(self, label: str = "", category: str = "Visual") -> InspectionChecklistItem:
        item = InspectionChecklistItem(id=new_id("chk"), label=label, category=category)
        self.draft.checklist.append(item)
        return item

    def remove_checklist_item(self, item_id: str) -> None:
        self.draft.checklist = [c for c in self.draft.checklist if c.id != item_id]

    def import_checklist(self, source: ProductDefinition) -> List[InspectionChecklistItem]:
        self.draft.checklist = import_checklist(self.draft.checklist, source.checklist)
        return self.draft.checklist

    def categories(self, products: Iterable[ProductDefinition], exclude_item_id: Optional[str] = None) -> List[str]:
        return available_categories(products, self.draft.checklist, exclude_item_id)

    # ── Commit ───────────────────────────────────────────────────────────

    def commit(
        self,
        products: Sequence[ProductDefinition],
        today: Optional[date] = None,
    ) -> Tuple[ProductDefinition, List[ProductDefinition]]:
        """Return the saved product and the new product list; ``products`` is not modified."""
        saved = self.draft.model_copy(deep=True, update={"last_modified": today or date.today()})
        if any(p.id == saved.id for p in products):
            return saved, [saved if p.id == saved.id else p for p in products]
        return saved, [*products, saved]

    @staticmethod
    def _index(rows, row_id: str, entity: str) -> int:
        for index, row in enumerate(rows):
            if row.id == row_id:
                return index
        raise EntityNotFoundException(entity, row_id)
