"""
Headline KPIs read across the store.
"""
from collections import Counter

from app import seed_data
from app.core.inventory import summarize_inventory
from app.database import InMemoryStore
from app.models.enums import BatchStatus, InspectionStatus, OrderStatus
from app.repositories.batch_repository import ProductionBatchRepository
from app.repositories.inspection_repository import InspectionRepository
from app.repositories.inventory_repository import InventoryRepository
from app.repositories.purchase_order_repository import PurchaseOrderRepository
from app.schemas.dashboard import DashboardSummary
from app.utils.rounding import percentage


class DashboardService:

    def __init__(self, store: InMemoryStore):
        self._inventory_repo = InventoryRepository(store)
        self._batch_repo = ProductionBatchRepository(store)
        self._po_repo = PurchaseOrderRepository(store)
        self._inspection_repo = InspectionRepository(store)

    def get_summary(self) -> DashboardSummary:
        inventory = summarize_inventory(self._inventory_repo.list_all())
        batches = self._batch_repo.list_all()
        orders = self._po_repo.list_all()
        inspections = self._inspection_repo.list_all()

        batch_counts = Counter(b.status.value for b in batches)
        order_counts = Counter(o.status.value for o in orders)
        passed = sum(1 for i in inspections if i.status == InspectionStatus.PASS)

        return DashboardSummary(
            inventory_value=inventory.total_value,
            low_stock_count=inventory.low_stock_count,
            active_batches=batch_counts.get(BatchStatus.ACTIVE.value, 0),
            batches_by_status=dict(batch_counts),
            open_orders=sum(1 for o in orders if o.status != OrderStatus.DONE),
            orders_by_status=dict(order_counts),
            inspections_total=len(inspections),
            inspection_pass_rate=percentage(passed, len(inspections)),
            production_output=seed_data.PRODUCTION_OUTPUT,
            inventory_levels=seed_data.INVENTORY_LEVELS,
        )
