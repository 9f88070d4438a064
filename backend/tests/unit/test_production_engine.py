from datetime import date, datetime, timezone

import pytest

from app.core.exceptions import (
    BusinessRuleViolationException,
    EntityNotFoundException,
    InvalidStageTransitionException,
    ValidationException,
)
from app.core.production import (
    advance_stage,
    available_quantity,
    build_batch,
    build_stages,
    derive_batch_status,
    hold_batch,
    is_valid_stage_sequence,
    resume_batch,
    revert_stage,
    set_stage_completed_at,
)
from app.models.enums import BatchStatus, StageStatus
from app.models.product import ProcessStageDefinition
from app.models.production import ProductionBatch, ProductionStage
from app.models.purchase_order import PurchaseOrder

NOW = datetime(2024, 3, 12, 9, 30, tzinfo=timezone.utc)


def _batch(*stages, status=BatchStatus.PLANNED, batch_id="BATCH-1", po_id="PO-1", quantity=10):
    return ProductionBatch(
        id=batch_id,
        po_id=po_id,
        customer="Acme",
        product="Widget",
        sku="WID-1",
        quantity=quantity,
        status=status,
        start_date=date(2024, 3, 1),
        stages=list(stages) or [
            ProductionStage(id="A", name="Cut"),
            ProductionStage(id="B", name="Weld"),
            ProductionStage(id="C", name="Pack"),
        ],
    )


def _statuses(batch):
    return [s.status for s in batch.stages]


def _po(total=100, fulfilled=0):
    return PurchaseOrder(
        id="PO-1", customer="Acme", product="Widget", sku="WID-1",
        total_qty=total, fulfilled_qty=fulfilled, due_date=date(2024, 6, 1),
    )


class TestAdvanceStage:
    def test_start_then_complete_first_stage(self):
        batch = _batch()

        started = advance_stage(batch, "A", now=NOW)
        assert _statuses(started) == [StageStatus.ACTIVE, StageStatus.PENDING, StageStatus.PENDING]
        assert started.status == BatchStatus.ACTIVE

        done = advance_stage(started, "A", now=NOW)
        assert _statuses(done) == [StageStatus.COMPLETED, StageStatus.ACTIVE, StageStatus.PENDING]
        assert done.stages[0].completed_at == NOW
        assert done.status == BatchStatus.ACTIVE
        assert done.logs[0].message == 'Stage "Cut" completed'
        assert done.logs[0].sub == "User Action"

    def test_input_batch_is_unchanged(self):
        batch = _batch()
        advance_stage(batch, "A", now=NOW)
        assert _statuses(batch) == [StageStatus.PENDING] * 3
        assert batch.logs == []

    def test_cannot_start_out_of_order(self):
        with pytest.raises(InvalidStageTransitionException):
            advance_stage(_batch(), "B")

    def test_completing_last_stage_completes_batch(self):
        batch = _batch()
        for stage_id in ("A", "A", "B", "C"):
            batch = advance_stage(batch, stage_id, now=NOW)

        assert batch.status == BatchStatus.COMPLETED
        assert batch.progress == 100
        with pytest.raises(InvalidStageTransitionException):
            advance_stage(batch, "C")

    def test_progress_rounds_half_up(self):
        stages = [
            ProductionStage(id=f"s{i}", name=f"S{i}", status=StageStatus.COMPLETED, completed_at=NOW)
            for i in range(5)
        ] + [ProductionStage(id=f"s{i}", name=f"S{i}") for i in range(5, 8)]
        assert _batch(*stages).progress == 63

    def test_unknown_stage(self):
        with pytest.raises(EntityNotFoundException):
            advance_stage(_batch(), "nope")

    def test_on_hold_batch_rejects_transitions(self):
        batch = hold_batch(_batch(), now=NOW)
        with pytest.raises(BusinessRuleViolationException):
            advance_stage(batch, "A")


class TestRevertStage:
    def test_revert_last_completed_stage(self):
        batch = advance_stage(advance_stage(_batch(), "A", now=NOW), "A", now=NOW)

        reverted = revert_stage(batch, "A", now=NOW)

        assert _statuses(reverted) == [StageStatus.ACTIVE, StageStatus.PENDING, StageStatus.PENDING]
        assert reverted.stages[0].completed_at is None
        assert reverted.logs[0].message == 'Stage "Cut" marked incomplete'
        assert reverted.logs[0].sub == "User Correction"
        assert is_valid_stage_sequence(reverted.stages)

    def test_only_the_most_recent_completion_can_be_reverted(self):
        batch = _batch()
        for stage_id in ("A", "A", "B"):
            batch = advance_stage(batch, stage_id, now=NOW)

        with pytest.raises(InvalidStageTransitionException):
            revert_stage(batch, "A")

    def test_non_completed_stage_cannot_be_reverted(self):
        with pytest.raises(InvalidStageTransitionException):
            revert_stage(_batch(), "A")

    def test_reverting_final_stage_reopens_completed_batch(self):
        batch = _batch()
        for stage_id in ("A", "A", "B", "C"):
            batch = advance_stage(batch, stage_id, now=NOW)
        assert batch.status == BatchStatus.COMPLETED

        reverted = revert_stage(batch, "C", now=NOW)

        assert reverted.status == BatchStatus.ACTIVE
        assert _statuses(reverted) == [StageStatus.COMPLETED, StageStatus.COMPLETED, StageStatus.ACTIVE]
        assert reverted.progress == 67
        assert is_valid_stage_sequence(reverted.stages)


class TestTimestampsAndHold:
    def test_edit_completed_timestamp(self):
        batch = advance_stage(advance_stage(_batch(), "A", now=NOW), "A", now=NOW)
        new_time = datetime(2024, 3, 11, 8, 0, tzinfo=timezone.utc)

        edited = set_stage_completed_at(batch, "A", new_time)

        assert edited.stages[0].completed_at == new_time
        assert edited.logs == batch.logs
        assert _statuses(edited) == _statuses(batch)

    def test_timestamp_requires_completed_stage(self):
        with pytest.raises(InvalidStageTransitionException):
            set_stage_completed_at(_batch(), "A", NOW)

    def test_hold_and_resume(self):
        active = advance_stage(_batch(), "A", now=NOW)
        held = hold_batch(active, now=NOW)
        assert held.status == BatchStatus.ON_HOLD
        assert derive_batch_status(held.status, held.stages) == BatchStatus.ON_HOLD

        resumed = resume_batch(held, now=NOW)
        assert resumed.status == BatchStatus.ACTIVE
        assert [log.message for log in resumed.logs[:2]] == ["Batch resumed", "Batch put on hold"]

    def test_completed_batch_cannot_be_held(self):
        batch = _batch(ProductionStage(id="A", name="Cut"))
        batch = advance_stage(advance_stage(batch, "A", now=NOW), "A", now=NOW)
        with pytest.raises(BusinessRuleViolationException):
            hold_batch(batch)


class TestBuildBatch:
    def test_quantity_limited_to_unbatched_units(self):
        existing = [_batch(quantity=60)]
        po = _po(total=100, fulfilled=10)

        assert available_quantity(po, existing) == 30
        with pytest.raises(ValidationException) as exc:
            build_batch("BATCH-2", po, 31, existing)
        assert exc.value.details["available"] == 30

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationException):
            build_batch("BATCH-2", _po(), 0, [])

    def test_new_batch_uses_product_stages_in_order(self):
        definitions = [
            ProcessStageDefinition(id="st2", name="Assemble", order=2),
            ProcessStageDefinition(id="st1", name="Cut", order=1),
        ]
        batch = build_batch("BATCH-2", _po(), 25, [], stage_definitions=definitions, now=NOW)

        assert batch.status == BatchStatus.PLANNED
        assert batch.start_date == NOW.date()
        assert [(s.id, s.name) for s in batch.stages] == [("s1", "Cut"), ("s2", "Assemble")]
        assert batch.logs[0].message == "Batch created"
        assert batch.progress == 0

    def test_default_stage_template(self):
        stages = build_stages()
        assert [s.name for s in stages] == ["Material Cut", "Assembly A", "Assembly B", "QA Check", "Packaging"]
        assert all(s.status == StageStatus.PENDING for s in stages)
