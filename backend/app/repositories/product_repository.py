from typing import Optional

from app.core.master_data import find_product_by_sku
from app.database import InMemoryStore
from app.models.product import ProductDefinition
from app.repositories.base import BaseRepository


class ProductRepository(BaseRepository[ProductDefinition]):
    def __init__(self, store: InMemoryStore):
        super().__init__(ProductDefinition, store, "products")

    def get_by_sku(self, sku: str) -> Optional[ProductDefinition]:
        return find_product_by_sku(self.list_all(), sku)
