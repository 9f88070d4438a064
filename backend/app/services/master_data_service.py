"""
Master Data Service: product templates and their edit sessions.

Open sessions live in ``store.edit_sessions``; the committed product list
changes only on ``commit_session``.
"""
import logging
from typing import List, Optional

from app.core.exceptions import EntityNotFoundException
from app.core.master_data import (
    ProductEditSession,
    available_categories,
    format_specs,
    new_product,
)
from app.database import InMemoryStore
from app.models.product import (
    BOMItemDefinition,
    InspectionChecklistItem,
    ProcessStageDefinition,
    ProductDefinition,
    StageParameter,
)
from app.repositories.inventory_repository import InventoryRepository
from app.repositories.product_repository import ProductRepository
from app.schemas.master_data import (
    BOMItemChangeRequest,
    ChecklistImportRequest,
    ChecklistItemAddRequest,
    DraftUpdateRequest,
    EditSessionResponse,
    ParameterAddRequest,
    ProductSummaryResponse,
    StageAddRequest,
)
from app.utils.events import EntityCreatedEvent, EntityUpdatedEvent, get_event_bus

logger = logging.getLogger(__name__)


class MasterDataService:

    def __init__(self, store: InMemoryStore):
        self._store = store
        self._repo = ProductRepository(store)
        self._inventory_repo = InventoryRepository(store)
        self._bus = get_event_bus()

    # ── Committed products ───────────────────────────────────────────────

    def list_products(self) -> List[ProductSummaryResponse]:
        return [
            ProductSummaryResponse(
                id=p.id,
                sku=p.sku,
                name=p.name,
                version=p.version,
                category=p.category,
                bom_count=len(p.bom),
                stage_count=len(p.stages),
                checklist_count=len(p.checklist),
                last_modified=p.last_modified,
            )
            for p in self._repo.list_all()
        ]

    def get_product(self, product_id: str) -> ProductDefinition:
        product = self._repo.get_by_id(product_id)
        if not product:
            raise EntityNotFoundException("ProductDefinition", product_id)
        return product

    def get_specs(self, product_id: str) -> str:
        return format_specs(self.get_product(product_id))

    def list_categories(self) -> List[str]:
        return available_categories(self._repo.list_all())

    # ── Edit sessions ────────────────────────────────────────────────────

    def open_session(self, product_id: Optional[str] = None) -> ProductEditSession:
        if product_id:
            session = ProductEditSession(self.get_product(product_id))
        else:
            session = ProductEditSession(new_product(), is_new=True)
        self._store.edit_sessions[session.id] = session
        logger.info("edit_session_opened session_id=%s product_id=%s", session.id, session.product_id)
        return session

    def get_session(self, session_id: str) -> ProductEditSession:
        session = self._store.edit_sessions.get(session_id)
        if session is None:
            raise EntityNotFoundException("EditSession", session_id)
        return session

    def discard_session(self, session_id: str) -> None:
        if self._store.edit_sessions.pop(session_id, None) is None:
            raise EntityNotFoundException("EditSession", session_id)

    def update_draft(self, session_id: str, body: DraftUpdateRequest) -> ProductDefinition:
        return self.get_session(session_id).update(**body.model_dump(exclude_unset=True))

    def session_specs(self, session_id: str) -> str:
        return format_specs(self.get_session(session_id).draft)

    def session_categories(self, session_id: str, exclude_item_id: Optional[str] = None) -> List[str]:
        return self.get_session(session_id).categories(self._repo.list_all(), exclude_item_id)

    def add_bom_line(self, session_id: str) -> BOMItemDefinition:
        return self.get_session(session_id).add_bom_line(self._inventory_repo.list_all())

    def change_bom_item(self, session_id: str, line_id: str, body: BOMItemChangeRequest) -> BOMItemDefinition:
        session = self.get_session(session_id)
        item = self._inventory_repo.get_by_id(body.inventory_item_id)
        if not item:
            raise EntityNotFoundException("InventoryItem", body.inventory_item_id)
        return session.change_bom_item(line_id, item)

    def remove_bom_line(self, session_id: str, line_id: str) -> None:
        self.get_session(session_id).remove_bom_line(line_id)

    def add_stage(self, session_id: str, body: StageAddRequest) -> ProcessStageDefinition:
        return self.get_session(session_id).add_stage(name=body.name)

    def remove_stage(self, session_id: str, stage_id: str) -> None:
        self.get_session(session_id).remove_stage(stage_id)

    def add_parameter(self, session_id: str, stage_id: str, body: ParameterAddRequest) -> StageParameter:
        return self.get_session(session_id).add_parameter(stage_id, name=body.name, target_value=body.target_value)

    def add_checklist_item(self, session_id: str, body: ChecklistItemAddRequest) -> InspectionChecklistItem:
        return self.get_session(session_id).add_checklist_item(label=body.label, category=body.category)

    def remove_checklist_item(self, session_id: str, item_id: str) -> None:
        self.get_session(session_id).remove_checklist_item(item_id)

    def import_checklist(self, session_id: str, body: ChecklistImportRequest) -> List[InspectionChecklistItem]:
        session = self.get_session(session_id)
        return session.import_checklist(self.get_product(body.source_product_id))

    def commit_session(self, session_id: str) -> ProductDefinition:
        with self._store.lock:
            session = self.get_session(session_id)
            saved, products = session.commit(self._repo.list_all())
            self._repo.replace_all(products)
            self._store.edit_sessions.pop(session_id)

        if session.is_new:
            self._bus.publish(EntityCreatedEvent(entity_type="product", entity_id=saved.id))
        else:
            self._bus.publish(EntityUpdatedEvent(
                entity_type="product",
                entity_id=saved.id,
                new_values={"version": saved.version, "sku": saved.sku},
            ))
        return saved


def session_response(session: ProductEditSession) -> EditSessionResponse:
    return EditSessionResponse(
        session_id=session.id,
        product_id=session.product_id,
        is_new=session.is_new,
        draft=session.draft,
    )
