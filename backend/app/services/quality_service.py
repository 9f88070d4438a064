"""
Quality Service: inspections scored from their checklist items.
"""
from collections import defaultdict
from datetime import date
from typing import Dict, List, Optional

from app.config import settings
from app.core.exceptions import EntityNotFoundException
from app.core.master_data import checklist_to_inspection_items
from app.core.scoring import InspectionScore, compute_inspection_score
from app.database import InMemoryStore
from app.models.quality import Inspection, InspectionItem
from app.repositories.batch_repository import ProductionBatchRepository
from app.repositories.inspection_repository import InspectionRepository
from app.repositories.product_repository import ProductRepository
from app.schemas.quality import (
    InspectionDetailResponse,
    InspectionDraftResponse,
    InspectionItemPayload,
    InspectionSubmitRequest,
)
from app import seed_data
from app.utils.events import EntityCreatedEvent, get_event_bus
from app.utils.ids import next_sequential_id


class QualityService:

    def __init__(self, store: InMemoryStore):
        self._store = store
        self._repo = InspectionRepository(store)
        self._batch_repo = ProductionBatchRepository(store)
        self._product_repo = ProductRepository(store)
        self._bus = get_event_bus()

    def list_inspections(
        self,
        status: Optional[str] = None,
        batch_id: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[Inspection]:
        return self._repo.list_filtered(status=status, batch_id=batch_id, search=search)

    def get_inspection(self, inspection_id: str) -> InspectionDetailResponse:
        inspection = self._repo.get_by_id(inspection_id)
        if not inspection:
            raise EntityNotFoundException("Inspection", inspection_id)
        return InspectionDetailResponse(
            **inspection.model_dump(),
            groups={
                category: [i.model_dump() for i in rows]
                for category, rows in group_by_category(inspection.items).items()
            },
        )

    def template_items(self, sku: str) -> List[InspectionItem]:
        """Fresh pending copies of the product's checklist, or the default checklist."""
        product = self._product_repo.get_by_sku(sku)
        if product and product.checklist:
            return checklist_to_inspection_items(product.checklist)
        return seed_data.default_checklist()

    def start_inspection(self, batch_id: str, inspector: str = "Current User") -> InspectionDraftResponse:
        batch = self._batch_repo.get_by_id(batch_id)
        if not batch:
            raise EntityNotFoundException("ProductionBatch", batch_id)
        items = self.template_items(batch.sku)
        result = self.score(items)
        return InspectionDraftResponse(
            batch_id=batch.id,
            product=batch.product,
            sku=batch.sku,
            inspector=inspector,
            date=date.today(),
            items=[i.model_dump() for i in items],
            score=result.score,
            status=result.status,
        )

    def score(self, items: List[InspectionItem]) -> InspectionScore:
        return compute_inspection_score(items, count_pending=settings.INSPECTION_COUNT_PENDING)

    def preview_score(self, items: List[InspectionItemPayload]) -> InspectionScore:
        return self.score([InspectionItem(**i.model_dump()) for i in items])

    def submit_inspection(self, body: InspectionSubmitRequest) -> Inspection:
        with self._store.lock:
            batch = self._batch_repo.get_by_id(body.batch_id)
            if not batch:
                raise EntityNotFoundException("ProductionBatch", body.batch_id)

            if body.items is not None:
                items = [InspectionItem(**i.model_dump()) for i in body.items]
            else:
                items = self.template_items(batch.sku)
            result = self.score(items)
            day = body.date or date.today()

            inspection = Inspection(
                id=next_sequential_id(f"INS-{day.year}-", (i.id for i in self._repo.list_all()), start=885),
                batch_id=batch.id,
                product=batch.product,
                sku=batch.sku,
                inspector=body.inspector,
                date=day,
                status=result.status,
                score=result.score,
                items=items,
                overall_notes=body.overall_notes,
                images=body.images,
            )
            created = self._repo.create(inspection, prepend=True)
        self._bus.publish(EntityCreatedEvent(entity_type="inspection", entity_id=created.id))
        return created


def group_by_category(items: List[InspectionItem]) -> Dict[str, List[InspectionItem]]:
    groups: Dict[str, List[InspectionItem]] = defaultdict(list)
    for item in items:
        groups[item.category].append(item)
    return dict(groups)
