from typing import List, Optional

from app.database import InMemoryStore
from app.models.quality import Inspection
from app.repositories.base import BaseRepository


class InspectionRepository(BaseRepository[Inspection]):
    def __init__(self, store: InMemoryStore):
        super().__init__(Inspection, store, "inspections")

    def list_filtered(
        self,
        status: Optional[str] = None,
        batch_id: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[Inspection]:
        term = (search or "").strip().lower()
        rows = self.list_all()
        if status and status != "All":
            rows = [i for i in rows if i.status.value == status]
        if batch_id:
            rows = [i for i in rows if i.batch_id == batch_id]
        if term:
            rows = [
                i for i in rows
                if term in i.id.lower() or term in i.batch_id.lower()
                or term in i.product.lower() or term in i.inspector.lower()
            ]
        return rows
