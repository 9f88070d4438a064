"""
Production Service: Service Layer (SRP / DIP)

Loads a batch, runs the pure stage engine on it and stores the result.
"""
from typing import Callable, List, Optional

from app.core import production as engine
from app.core.exceptions import EntityNotFoundException
from app.database import InMemoryStore
from app.models.production import ProductionBatch
from app.repositories.batch_repository import ProductionBatchRepository
from app.repositories.product_repository import ProductRepository
from app.repositories.purchase_order_repository import PurchaseOrderRepository
from app.schemas.production import BatchCreateRequest, StageTimestampUpdateRequest
from app.utils.events import EntityCreatedEvent, StatusChangedEvent, get_event_bus
from app.utils.ids import next_sequential_id


class ProductionService:

    def __init__(self, store: InMemoryStore):
        self._store = store
        self._repo = ProductionBatchRepository(store)
        self._po_repo = PurchaseOrderRepository(store)
        self._product_repo = ProductRepository(store)
        self._bus = get_event_bus()

    def list_batches(self, po_id: Optional[str] = None, status: Optional[str] = None) -> List[ProductionBatch]:
        return self._repo.list_filtered(po_id=po_id, status=status)

    def get_batch(self, batch_id: str) -> ProductionBatch:
        batch = self._repo.get_by_id(batch_id)
        if not batch:
            raise EntityNotFoundException("ProductionBatch", batch_id)
        return batch

    def create_batch(self, body: BatchCreateRequest) -> ProductionBatch:
        with self._store.lock:
            po = self._po_repo.get_by_id(body.po_id)
            if not po:
                raise EntityNotFoundException("PurchaseOrder", body.po_id)
            product = self._product_repo.get_by_sku(po.sku)
            existing = self._repo.list_all()
            batch = engine.build_batch(
                batch_id=next_sequential_id("BATCH-", (b.id for b in existing), start=1001),
                po=po,
                quantity=body.quantity,
                existing=existing,
                stage_definitions=product.stages if product else (),
                priority=body.priority,
            )
            result = self._repo.create(batch)
        self._bus.publish(EntityCreatedEvent(entity_type="production_batch", entity_id=result.id))
        return result

    def advance_stage(self, batch_id: str, stage_id: str) -> ProductionBatch:
        return self._transition(batch_id, lambda b: engine.advance_stage(b, stage_id), reason=f"advance:{stage_id}")

    def revert_stage(self, batch_id: str, stage_id: str) -> ProductionBatch:
        return self._transition(batch_id, lambda b: engine.revert_stage(b, stage_id), reason=f"revert:{stage_id}")

    def set_stage_timestamp(
        self,
        batch_id: str,
        stage_id: str,
        body: StageTimestampUpdateRequest,
    ) -> ProductionBatch:
        return self._transition(
            batch_id,
            lambda b: engine.set_stage_completed_at(b, stage_id, body.completed_at),
            reason=f"timestamp:{stage_id}",
        )

    def hold_batch(self, batch_id: str) -> ProductionBatch:
        return self._transition(batch_id, engine.hold_batch, reason="hold")

    def resume_batch(self, batch_id: str) -> ProductionBatch:
        return self._transition(batch_id, engine.resume_batch, reason="resume")

    def _transition(
        self,
        batch_id: str,
        change: Callable[[ProductionBatch], ProductionBatch],
        reason: str,
    ) -> ProductionBatch:
        with self._store.lock:
            batch = self.get_batch(batch_id)
            result = self._repo.replace(change(batch))
        if result.status != batch.status:
            self._bus.publish(StatusChangedEvent(
                entity_type="production_batch",
                entity_id=batch_id,
                old_status=batch.status.value,
                new_status=result.status.value,
                reason=reason,
            ))
        return result
