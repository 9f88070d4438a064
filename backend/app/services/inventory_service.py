"""
Inventory Service: Service Layer (SRP / DIP)
"""
import logging
from math import ceil
from typing import Iterable, List, Optional

from app.config import settings
from app.core.exceptions import DuplicateEntityException, EntityNotFoundException
from app.core.inventory import (
    StockEdit,
    apply_bulk_stock_edits,
    build_inventory_item,
    bulk_edit_candidates,
    find_invalid_stock_edits,
    summarize_inventory,
)
from app.database import InMemoryStore
from app.models.inventory import InventoryItem
from app.repositories.inventory_repository import InventoryRepository
from app.schemas.inventory import (
    BulkStockUpdateRequest,
    BulkStockValidationResponse,
    InventoryItemCreate,
    InventoryItemUpdate,
    InventoryListResponse,
    InventorySummaryResponse,
)
from app.utils.events import (
    EntityCreatedEvent,
    EntityDeletedEvent,
    EntityUpdatedEvent,
    get_event_bus,
)
from app.utils.ids import new_id

logger = logging.getLogger(__name__)


class InventoryService:

    def __init__(self, store: InMemoryStore):
        self._store = store
        self._repo = InventoryRepository(store)
        self._bus = get_event_bus()

    def list_items(
        self,
        page: int = 1,
        page_size: int = 50,
        status: Optional[str] = None,
        search: Optional[str] = None,
        category: Optional[str] = None,
    ) -> InventoryListResponse:
        matches = self._repo.list_filtered(status=status, search=search, category=category)
        items, total = self._repo.paginate(matches, page=page, page_size=page_size)
        return InventoryListResponse(
            items=items, total=total, page=page, page_size=page_size,
            total_pages=ceil(total / page_size) if total else 0,
        )

    def get_item(self, item_id: str) -> InventoryItem:
        item = self._repo.get_by_id(item_id)
        if not item:
            raise EntityNotFoundException("InventoryItem", item_id)
        return item

    def add_item(self, data: InventoryItemCreate) -> InventoryItem:
        with self._store.lock:
            item = build_inventory_item(new_id("inv"), data.model_dump())
            self._check_unique_sku(item)
            result = self._repo.create(item)
        self._bus.publish(EntityCreatedEvent(entity_type="inventory", entity_id=result.id))
        return result

    def edit_item(self, item_id: str, data: InventoryItemUpdate) -> InventoryItem:
        with self._store.lock:
            current = self.get_item(item_id)
            draft = current.model_dump()
            draft.update(data.model_dump(exclude_unset=True))
            item = build_inventory_item(item_id, draft)
            self._check_unique_sku(item)
            result = self._repo.replace(item)
        self._bus.publish(EntityUpdatedEvent(
            entity_type="inventory",
            entity_id=item_id,
            old_values={"stock": current.stock, "status": current.status.value},
            new_values={"stock": result.stock, "status": result.status.value},
        ))
        return result

    def delete_item(self, item_id: str) -> None:
        with self._store.lock:
            self.get_item(item_id)
            self._repo.delete(item_id)
        self._bus.publish(EntityDeletedEvent(entity_type="inventory", entity_id=item_id))

    def validate_bulk_update(self, body: BulkStockUpdateRequest) -> BulkStockValidationResponse:
        invalid = find_invalid_stock_edits(self._repo.list_all(), self._edits(body))
        return BulkStockValidationResponse(valid=not invalid, invalid_rows=invalid)

    def bulk_update_stock(self, body: BulkStockUpdateRequest) -> List[InventoryItem]:
        edits = self._edits(body)
        with self._store.lock:
            before = {item.id: item for item in self._repo.list_all()}
            updated = apply_bulk_stock_edits(list(before.values()), edits)
            self._repo.replace_all(updated)

        edited_ids = {edit.id for edit in edits}
        logger.info("inventory_bulk_update count=%s", len(edited_ids))
        changed = [item for item in updated if item.id in edited_ids]
        for item in changed:
            self._bus.publish(EntityUpdatedEvent(
                entity_type="inventory",
                entity_id=item.id,
                old_values={"stock": before[item.id].stock, "status": before[item.id].status.value},
                new_values={"stock": item.stock, "status": item.status.value},
            ))
        return changed

    def bulk_candidates(self, selected_ids: Iterable[str], search: Optional[str] = None) -> List[InventoryItem]:
        return bulk_edit_candidates(self._repo.list_all(), selected_ids, search)

    def get_summary(self) -> InventorySummaryResponse:
        summary = summarize_inventory(self._repo.list_all())
        return InventorySummaryResponse(
            item_count=summary.item_count,
            total_value=summary.total_value,
            low_stock_count=summary.low_stock_count,
            status_counts=summary.status_counts,
        )

    def _check_unique_sku(self, item: InventoryItem) -> None:
        if not settings.ENFORCE_UNIQUE_SKU:
            return
        existing = self._repo.get_by_sku(item.sku)
        if existing and existing.id != item.id:
            raise DuplicateEntityException("InventoryItem", "sku", item.sku)

    @staticmethod
    def _edits(body: BulkStockUpdateRequest) -> List[StockEdit]:
        return [StockEdit(id=row.id, new_stock=row.new_stock) for row in body.edits]
