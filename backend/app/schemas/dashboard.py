from typing import Dict, List

from pydantic import BaseModel


class DashboardSummary(BaseModel):
    inventory_value: float
    low_stock_count: int
    active_batches: int
    batches_by_status: Dict[str, int]
    open_orders: int
    orders_by_status: Dict[str, int]
    inspections_total: int
    inspection_pass_rate: int
    production_output: List[Dict]
    inventory_levels: List[Dict]
