from app.schemas.inventory import (
    InventoryItemCreate,
    InventoryItemUpdate,
    InventoryItemResponse,
    InventoryListResponse,
    StockEditRow,
    BulkStockUpdateRequest,
    BulkStockValidationResponse,
    InventorySummaryResponse,
)
from app.schemas.production import (
    BatchCreateRequest,
    StageTimestampUpdateRequest,
    ProductionStageResponse,
    BatchLogResponse,
    ProductionBatchResponse,
)
from app.schemas.quality import (
    InspectionItemPayload,
    ScorePreviewRequest,
    ScoreResponse,
    InspectionSubmitRequest,
    InspectionDraftResponse,
    InspectionResponse,
    InspectionDetailResponse,
)
from app.schemas.master_data import (
    ProductSummaryResponse,
    EditSessionCreateRequest,
    EditSessionResponse,
    DraftUpdateRequest,
    BOMItemChangeRequest,
    StageAddRequest,
    ParameterAddRequest,
    ChecklistItemAddRequest,
    ChecklistImportRequest,
    CategoriesResponse,
    SpecsResponse,
)
from app.schemas.purchase_order import (
    PurchaseOrderResponse,
    MaterialRequirementResponse,
    PurchaseOrderDetailResponse,
)
from app.schemas.schedule import TaskPlacementResponse, ScheduleTimelineResponse
from app.schemas.settings import (
    UserInviteRequest,
    UserRoleUpdateRequest,
    UserResponse,
    RoleCreateRequest,
    RoleUpdateRequest,
    RoleResponse,
    PermissionResponse,
)
from app.schemas.dashboard import DashboardSummary
