from typing import List, Optional

from app.database import InMemoryStore
from app.models.schedule import ProductionLine, ScheduleTask
from app.repositories.base import BaseRepository


class ProductionLineRepository(BaseRepository[ProductionLine]):
    def __init__(self, store: InMemoryStore):
        super().__init__(ProductionLine, store, "production_lines")


class ScheduleTaskRepository(BaseRepository[ScheduleTask]):
    def __init__(self, store: InMemoryStore):
        super().__init__(ScheduleTask, store, "schedule_tasks")

    def list_filtered(
        self,
        line_id: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[ScheduleTask]:
        tasks = self.list_all()
        if line_id:
            tasks = [t for t in tasks if t.line_id == line_id]
        if status:
            tasks = [t for t in tasks if t.status.value == status]
        return tasks
