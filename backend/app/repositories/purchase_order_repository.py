from typing import List, Optional

from app.database import InMemoryStore
from app.models.purchase_order import PurchaseOrder
from app.repositories.base import BaseRepository


class PurchaseOrderRepository(BaseRepository[PurchaseOrder]):
    def __init__(self, store: InMemoryStore):
        super().__init__(PurchaseOrder, store, "purchase_orders")

    def list_filtered(
        self,
        status: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[PurchaseOrder]:
        term = (search or "").strip().lower()
        orders = self.list_all()
        if status:
            orders = [o for o in orders if o.status.value == status]
        if term:
            orders = [
                o for o in orders
                if term in o.id.lower() or term in o.customer.lower() or term in o.product.lower()
            ]
        return orders
