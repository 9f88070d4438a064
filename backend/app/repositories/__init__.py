# Repository Layer: Data Access (Repository Pattern, GoF)
from app.repositories.base import BaseRepository
from app.repositories.inventory_repository import InventoryRepository
from app.repositories.product_repository import ProductRepository
from app.repositories.purchase_order_repository import PurchaseOrderRepository
from app.repositories.batch_repository import ProductionBatchRepository
from app.repositories.inspection_repository import InspectionRepository
from app.repositories.schedule_repository import ProductionLineRepository, ScheduleTaskRepository
from app.repositories.user_repository import PermissionRepository, RoleRepository, UserRepository

__all__ = [
    "BaseRepository",
    "InventoryRepository",
    "ProductRepository",
    "PurchaseOrderRepository",
    "ProductionBatchRepository",
    "InspectionRepository",
    "ProductionLineRepository",
    "ScheduleTaskRepository",
    "UserRepository",
    "RoleRepository",
    "PermissionRepository",
]
