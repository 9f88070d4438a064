"""
Purchase Order Service: order list and the per-order batching view.
"""
from typing import List, Optional

from app.core.exceptions import EntityNotFoundException
from app.core.master_data import material_requirements
from app.core.production import available_quantity, planned_quantity
from app.database import InMemoryStore
from app.models.purchase_order import PurchaseOrder
from app.repositories.batch_repository import ProductionBatchRepository
from app.repositories.inventory_repository import InventoryRepository
from app.repositories.product_repository import ProductRepository
from app.repositories.purchase_order_repository import PurchaseOrderRepository
from app.schemas.purchase_order import PurchaseOrderDetailResponse


class PurchaseOrderService:

    def __init__(self, store: InMemoryStore):
        self._repo = PurchaseOrderRepository(store)
        self._batch_repo = ProductionBatchRepository(store)
        self._product_repo = ProductRepository(store)
        self._inventory_repo = InventoryRepository(store)

    def list_orders(self, status: Optional[str] = None, search: Optional[str] = None) -> List[PurchaseOrder]:
        return self._repo.list_filtered(status=status, search=search)

    def get_order(self, po_id: str) -> PurchaseOrder:
        order = self._repo.get_by_id(po_id)
        if not order:
            raise EntityNotFoundException("PurchaseOrder", po_id)
        return order

    def get_order_detail(self, po_id: str) -> PurchaseOrderDetailResponse:
        order = self.get_order(po_id)
        batches = self._batch_repo.list_all()
        available = available_quantity(order, batches)

        product = self._product_repo.get_by_sku(order.sku)
        materials = []
        if product:
            materials = [
                {
                    "inventory_item_id": m.inventory_item_id,
                    "name": m.name,
                    "unit": m.unit,
                    "required": m.required,
                    "available": m.available,
                    "shortage": m.shortage,
                }
                for m in material_requirements(product, max(available, 0), self._inventory_repo.list_all())
            ]

        return PurchaseOrderDetailResponse(
            order=order.model_dump(),
            planned_qty=planned_quantity(order.id, batches),
            available_qty=available,
            batches=[b.model_dump() for b in batches if b.po_id == order.id],
            materials=materials,
            has_shortage=any(m["shortage"] > 0 for m in materials),
        )
