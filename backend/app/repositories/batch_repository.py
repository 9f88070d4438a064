from typing import List, Optional

from app.database import InMemoryStore
from app.models.production import ProductionBatch
from app.repositories.base import BaseRepository


class ProductionBatchRepository(BaseRepository[ProductionBatch]):
    def __init__(self, store: InMemoryStore):
        super().__init__(ProductionBatch, store, "batches")

    def list_filtered(
        self,
        po_id: Optional[str] = None,
        status: Optional[str] = None,
        sku: Optional[str] = None,
    ) -> List[ProductionBatch]:
        batches = self.list_all()
        if po_id is not None:
            batches = [b for b in batches if b.po_id == po_id]
        if status is not None:
            batches = [b for b in batches if b.status.value == status]
        if sku is not None:
            batches = [b for b in batches if b.sku == sku]
        return batches
