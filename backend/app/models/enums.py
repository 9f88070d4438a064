from enum import Enum


class InventoryStatus(str, Enum):
    OK = "OK"
    LOW = "Low"
    CRITICAL = "Critical"


class StageStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"
    BLOCKED = "blocked"


class BatchStatus(str, Enum):
    PLANNED = "Planned"
    ACTIVE = "Active"
    COMPLETED = "Completed"
    ON_HOLD = "On Hold"


class BatchPriority(str, Enum):
    NORMAL = "Normal"
    HIGH = "High"
    URGENT = "Urgent"


class ChecklistItemStatus(str, Enum):
    PASS = "pass"
    FAIL = "fail"
    NA = "na"
    PENDING = "pending"


class InspectionStatus(str, Enum):
    PASS = "Pass"
    FAIL = "Fail"
    CONDITIONAL = "Conditional"


class OrderStatus(str, Enum):
    PENDING = "Pending"
    ALLOCATED = "Allocated"
    PRODUCTION = "Production"
    QA = "QA"
    PACKING = "Packing"
    DONE = "Done"


class LineType(str, Enum):
    ASSEMBLY = "Assembly"
    MACHINING = "Machining"
    PACKAGING = "Packaging"
    QA = "QA"


class LineStatus(str, Enum):
    OPERATIONAL = "Operational"
    MAINTENANCE = "Maintenance"
    OFFLINE = "Offline"


class TaskStatus(str, Enum):
    PLANNED = "Planned"
    ACTIVE = "Active"
    COMPLETED = "Completed"
    DELAYED = "Delayed"


class UserStatus(str, Enum):
    ACTIVE = "Active"
    INVITED = "Invited"
    SUSPENDED = "Suspended"


class PermissionGroup(str, Enum):
    MANUFACTURING = "Manufacturing"
    INVENTORY = "Inventory"
    QUALITY = "Quality"
    ADMIN = "Admin"
