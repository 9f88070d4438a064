"""
Production batch engine: the stage state machine as pure functions.

Stages complete strictly left to right: a batch's stage list is always a
prefix of ``completed`` stages, then at most one ``active`` stage, then
``pending`` (or ``blocked``) stages. Every transition returns a new batch.
"""
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Sequence, Tuple

from app.core.exceptions import (
    BusinessRuleViolationException,
    EntityNotFoundException,
    InvalidStageTransitionException,
    ValidationException,
)
from app.models.enums import BatchPriority, BatchStatus, StageStatus
from app.models.product import ProcessStageDefinition
from app.models.production import BatchLogEntry, ProductionBatch, ProductionStage
from app.models.purchase_order import PurchaseOrder

DEFAULT_STAGE_TEMPLATE: Tuple[Tuple[str, str], ...] = (
    ("Material Cut", "Rob T."),
    ("Assembly A", "Sarah J."),
    ("Assembly B", "Unassigned"),
    ("QA Check", "Quality Team"),
    ("Packaging", "Logistics"),
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def completed_prefix_length(stages: Sequence[ProductionStage]) -> int:
    count = 0
    for stage in stages:
        if stage.status != StageStatus.COMPLETED:
            break
        count += 1
    return count


def next_stage_index(stages: Sequence[ProductionStage]) -> Optional[int]:
    """Index of the stage allowed to move next, or None when every stage is done."""
    index = completed_prefix_length(stages)
    return index if index < len(stages) else None


def last_completed_index(stages: Sequence[ProductionStage]) -> Optional[int]:
    for index in range(len(stages) - 1, -1, -1):
        if stages[index].status == StageStatus.COMPLETED:
            return index
    return None


def is_valid_stage_sequence(stages: Sequence[ProductionStage]) -> bool:
    prefix = completed_prefix_length(stages)
    rest = stages[prefix:]
    if any(s.status == StageStatus.COMPLETED for s in rest):
        return False
    active = [i for i, s in enumerate(rest) if s.status == StageStatus.ACTIVE]
    return not active or active == [0]


def derive_batch_status(current: BatchStatus, stages: Sequence[ProductionStage]) -> BatchStatus:
    if current == BatchStatus.ON_HOLD:
        return current
    if stages and all(s.status == StageStatus.COMPLETED for s in stages):
        return BatchStatus.COMPLETED
    if any(s.status in (StageStatus.ACTIVE, StageStatus.COMPLETED) for s in stages):
        return BatchStatus.ACTIVE
    return BatchStatus.PLANNED


def _find_stage(batch: ProductionBatch, stage_id: str) -> int:
    for index, stage in enumerate(batch.stages):
        if stage.id == stage_id:
            return index
    raise EntityNotFoundException("ProductionStage", stage_id)


def _ensure_not_on_hold(batch: ProductionBatch) -> None:
    if batch.status == BatchStatus.ON_HOLD:
        raise BusinessRuleViolationException(
            f"Batch {batch.id} is on hold; resume it before changing stages."
        )


def _with_stages(
    batch: ProductionBatch,
    stages: List[ProductionStage],
    log: Optional[BatchLogEntry] = None,
) -> ProductionBatch:
    logs = [log, *batch.logs] if log else list(batch.logs)
    return batch.model_copy(update={
        "stages": stages,
        "status": derive_batch_status(batch.status, stages),
        "logs": logs,
    })


def advance_stage(
    batch: ProductionBatch,
    stage_id: str,
    now: Optional[datetime] = None,
) -> ProductionBatch:
    """
    Move one stage forward: ``pending -> active`` or ``active -> completed``.

    Only the designated next stage may start. Completing a stage stamps
    ``completed_at`` and starts its successor straight away.
    """
    _ensure_not_on_hold(batch)
    index = _find_stage(batch, stage_id)
    stages = [s.model_copy() for s in batch.stages]
    stage = stages[index]

    if stage.status == StageStatus.PENDING:
        if index != next_stage_index(stages):
            raise InvalidStageTransitionException(
                stage_id, f"Stage '{stage.name}' cannot start before the stages ahead of it complete."
            )
        stages[index] = stage.model_copy(update={"status": StageStatus.ACTIVE})
        return _with_stages(batch, stages)

    if stage.status == StageStatus.ACTIVE:
        now = now or _utcnow()
        stages[index] = stage.model_copy(update={"status": StageStatus.COMPLETED, "completed_at": now})
        successor = index + 1
        if successor < len(stages) and stages[successor].status == StageStatus.PENDING:
            stages[successor] = stages[successor].model_copy(update={"status": StageStatus.ACTIVE})
        log = BatchLogEntry(time=now, message=f'Stage "{stage.name}" completed', sub="User Action")
        return _with_stages(batch, stages, log)

    raise InvalidStageTransitionException(
        stage_id, f"Stage '{stage.name}' is {stage.status.value} and cannot be advanced."
    )


def revert_stage(
    batch: ProductionBatch,
    stage_id: str,
    now: Optional[datetime] = None,
) -> ProductionBatch:
    """
    Undo the most recent completion: ``completed -> active``.

    The successor that was started automatically drops back to ``pending``.
    Earlier completions cannot be reverted while later ones stand.
    """
    _ensure_not_on_hold(batch)
    index = _find_stage(batch, stage_id)
    stages = [s.model_copy() for s in batch.stages]
    stage = stages[index]

    if stage.status != StageStatus.COMPLETED:
        raise InvalidStageTransitionException(
            stage_id, f"Stage '{stage.name}' is {stage.status.value}; only completed stages can be reverted."
        )
    if index != last_completed_index(stages):
        raise InvalidStageTransitionException(
            stage_id, f"Stage '{stage.name}' is not the most recently completed stage."
        )

    stages[index] = stage.model_copy(update={"status": StageStatus.ACTIVE, "completed_at": None})
    successor = index + 1
    if successor < len(stages) and stages[successor].status == StageStatus.ACTIVE:
        stages[successor] = stages[successor].model_copy(update={"status": StageStatus.PENDING})

    log = BatchLogEntry(
        time=now or _utcnow(),
        message=f'Stage "{stage.name}" marked incomplete',
        sub="User Correction",
    )
    return _with_stages(batch, stages, log)


def set_stage_completed_at(
    batch: ProductionBatch,
    stage_id: str,
    completed_at: datetime,
) -> ProductionBatch:
    """Overwrite a completed stage's timestamp. Status and logs are untouched."""
    index = _find_stage(batch, stage_id)
    stage = batch.stages[index]
    if stage.status != StageStatus.COMPLETED:
        raise InvalidStageTransitionException(
            stage_id, f"Stage '{stage.name}' is {stage.status.value}; only completed stages carry a timestamp."
        )
    stages = list(batch.stages)
    stages[index] = stage.model_copy(update={"completed_at": completed_at})
    return batch.model_copy(update={"stages": stages})


def hold_batch(batch: ProductionBatch, now: Optional[datetime] = None) -> ProductionBatch:
    if batch.status == BatchStatus.COMPLETED:
        raise BusinessRuleViolationException(f"Batch {batch.id} is already completed.")
    if batch.status == BatchStatus.ON_HOLD:
        return batch
    log = BatchLogEntry(time=now or _utcnow(), message="Batch put on hold", sub="User Action")
    return batch.model_copy(update={"status": BatchStatus.ON_HOLD, "logs": [log, *batch.logs]})


def resume_batch(batch: ProductionBatch, now: Optional[datetime] = None) -> ProductionBatch:
    if batch.status != BatchStatus.ON_HOLD:
        return batch
    log = BatchLogEntry(time=now or _utcnow(), message="Batch resumed", sub="User Action")
    return batch.model_copy(update={
        "status": derive_batch_status(BatchStatus.PLANNED, batch.stages),
        "logs": [log, *batch.logs],
    })


def planned_quantity(po_id: str, batches: Iterable[ProductionBatch]) -> int:
    return sum(b.quantity for b in batches if b.po_id == po_id)


def available_quantity(po: PurchaseOrder, batches: Iterable[ProductionBatch]) -> int:
    """Units on the order not yet delivered or assigned to a batch."""
    return po.total_qty - po.fulfilled_qty - planned_quantity(po.id, batches)


def build_stages(definitions: Sequence[ProcessStageDefinition] = ()) -> List[ProductionStage]:
    if definitions:
        ordered = sorted(definitions, key=lambda d: d.order)
        return [
            ProductionStage(id=f"s{i}", name=d.name, assignee="Unassigned")
            for i, d in enumerate(ordered, start=1)
        ]
    return [
        ProductionStage(id=f"s{i}", name=name, assignee=assignee)
        for i, (name, assignee) in enumerate(DEFAULT_STAGE_TEMPLATE, start=1)
    ]


def build_batch(
    batch_id: str,
    po: PurchaseOrder,
    quantity: int,
    existing: Sequence[ProductionBatch],
    stage_definitions: Sequence[ProcessStageDefinition] = (),
    priority: BatchPriority = BatchPriority.NORMAL,
    now: Optional[datetime] = None,
) -> ProductionBatch:
    """Plan a new batch against a PO, refusing more than the order's unbatched quantity."""
    if quantity <= 0:
        raise ValidationException("Batch quantity must be greater than zero.")
    available = available_quantity(po, existing)
    if quantity > available:
        raise ValidationException(
            f"Quantity exceeds available unbatched items ({available}).",
            details={"po_id": po.id, "requested": quantity, "available": available},
        )

    now = now or _utcnow()
    return ProductionBatch(
        id=batch_id,
        po_id=po.id,
        customer=po.customer,
        product=po.product,
        sku=po.sku,
        quantity=quantity,
        completed_qty=0,
        status=BatchStatus.PLANNED,
        priority=priority,
        start_date=now.date(),
        stages=build_stages(stage_definitions),
        logs=[BatchLogEntry(time=now, message="Batch created", sub="System")],
    )
