"""
Inventory rules over lists of ``InventoryItem``.

Nothing here mutates its inputs; every operation returns new records so a
rejected bulk edit leaves the caller's collection untouched.
"""
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from app.core.exceptions import ValidationException
from app.models.enums import InventoryStatus
from app.models.inventory import InventoryItem

ALL_STATUSES = "All"

DEFAULT_CATEGORY = "General"
DEFAULT_UNIT = "pcs"
DEFAULT_MAX_STOCK = 100.0


@dataclass(frozen=True)
class StockEdit:
    id: str
    new_stock: float


@dataclass
class InventorySummary:
    item_count: int = 0
    total_value: float = 0.0
    low_stock_count: int = 0
    status_counts: Dict[str, int] = field(default_factory=dict)


def _number(value, default: float) -> float:
    # Blank, missing and zero all fall back, as the item form does.
    try:
        number = float(value) if value is not None and value != "" else 0.0
    except (TypeError, ValueError):
        number = 0.0
    return number or default


def build_inventory_item(item_id: str, draft: Mapping) -> InventoryItem:
    """Apply form defaults to a draft and return a validated item."""
    sku = (draft.get("sku") or "").strip()
    name = (draft.get("name") or "").strip()
    missing = [f for f, v in (("sku", sku), ("name", name)) if not v]
    if missing:
        raise ValidationException(
            f"Required fields missing: {', '.join(missing)}.",
            details={"missing_fields": missing},
        )

    return InventoryItem(
        id=item_id,
        sku=sku,
        name=name,
        category=(draft.get("category") or "").strip() or DEFAULT_CATEGORY,
        stock=_number(draft.get("stock"), 0.0),
        allocated=_number(draft.get("allocated"), 0.0),
        unit=(draft.get("unit") or "").strip() or DEFAULT_UNIT,
        max_stock=_number(draft.get("max_stock"), DEFAULT_MAX_STOCK),
        value=_number(draft.get("value"), 0.0),
    )


def find_invalid_stock_edits(
    items: Sequence[InventoryItem],
    edits: Iterable[StockEdit],
) -> List[dict]:
    """Rows that would block a bulk commit, with the reason for each."""
    by_id = {item.id: item for item in items}
    invalid = []
    for edit in edits:
        item = by_id.get(edit.id)
        if item is None:
            invalid.append({"id": edit.id, "new_stock": edit.new_stock, "reason": "not_found"})
        elif edit.new_stock < 0:
            invalid.append({
                "id": edit.id,
                "sku": item.sku,
                "new_stock": edit.new_stock,
                "reason": "negative_stock",
            })
        elif edit.new_stock > item.max_stock:
            invalid.append({
                "id": edit.id,
                "sku": item.sku,
                "new_stock": edit.new_stock,
                "max_stock": item.max_stock,
                "reason": "exceeds_max_stock",
            })
    return invalid


def apply_bulk_stock_edits(
    items: Sequence[InventoryItem],
    edits: Sequence[StockEdit],
) -> List[InventoryItem]:
    """
    All-or-nothing stock update.

    Raises ``ValidationException`` listing every offending row if any edit is
    invalid; otherwise returns a new list with the edited items replaced.
    When the same id appears twice the later edit wins.
    """
    invalid = find_invalid_stock_edits(items, edits)
    if invalid:
        raise ValidationException(
            f"{len(invalid)} stock edit(s) rejected; no changes were applied.",
            details={"invalid_rows": invalid},
        )

    new_stock = {edit.id: edit.new_stock for edit in edits}
    return [
        item.model_copy(update={"stock": new_stock[item.id]}) if item.id in new_stock else item
        for item in items
    ]


def filter_items(
    items: Iterable[InventoryItem],
    status: Optional[str] = None,
    search: Optional[str] = None,
) -> List[InventoryItem]:
    term = (search or "").strip().lower()
    results = []
    for item in items:
        if status and status != ALL_STATUSES and item.status.value != status:
            continue
        if term and not (
            term in item.name.lower()
            or term in item.sku.lower()
            or term in item.category.lower()
        ):
            continue
        results.append(item)
    return results


def bulk_edit_candidates(
    items: Iterable[InventoryItem],
    selected_ids: Iterable[str],
    search: Optional[str] = None,
) -> List[InventoryItem]:
    """Items that can still be added to a bulk edit, matched on name or SKU."""
    selected = set(selected_ids)
    term = (search or "").strip().lower()
    return [
        item for item in items
        if item.id not in selected
        and (not term or term in item.name.lower() or term in item.sku.lower())
    ]


def summarize_inventory(items: Sequence[InventoryItem]) -> InventorySummary:
    counts = Counter(item.status for item in items)
    return InventorySummary(
        item_count=len(items),
        total_value=round(sum(item.stock * item.value for item in items), 2),
        low_stock_count=len([i for i in items if i.status != InventoryStatus.OK]),
        status_counts={status.value: counts.get(status, 0) for status in InventoryStatus},
    )
