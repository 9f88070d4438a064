from typing import List, Optional

from app.core.inventory import filter_items
from app.database import InMemoryStore
from app.models.inventory import InventoryItem
from app.repositories.base import BaseRepository


class InventoryRepository(BaseRepository[InventoryItem]):
    def __init__(self, store: InMemoryStore):
        super().__init__(InventoryItem, store, "inventory")

    def list_filtered(
        self,
        status: Optional[str] = None,
        search: Optional[str] = None,
        category: Optional[str] = None,
    ) -> List[InventoryItem]:
        items = filter_items(self.list_all(), status=status, search=search)
        if category:
            items = [i for i in items if i.category == category]
        return items

    def get_by_sku(self, sku: str) -> Optional[InventoryItem]:
        return next((i for i in self.list_all() if i.sku == sku), None)
