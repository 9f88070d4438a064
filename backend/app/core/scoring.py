"""
Inspection scoring. Pure functions, no I/O.
"""
from dataclasses import dataclass
from typing import Iterable

from app.core.status import derive_inspection_status
from app.utils.rounding import percentage
from app.models.enums import ChecklistItemStatus, InspectionStatus
from app.models.quality import InspectionItem


@dataclass(frozen=True)
class InspectionScore:
    score: int
    status: InspectionStatus
    passed: int
    failed: int
    pending: int
    not_applicable: int
    scored: int


def compute_score(items: Iterable[InspectionItem], count_pending: bool = True) -> int:
    return compute_inspection_score(items, count_pending=count_pending).score


def compute_inspection_score(
    items: Iterable[InspectionItem],
    count_pending: bool = True,
) -> InspectionScore:
    """
    Score a checklist as round(100 * passed / scored).

    ``na`` items leave both numerator and denominator. ``pending`` items stay
    in the denominator unless ``count_pending`` is False, so an unresolved
    checklist scores like a partially failed one. An empty denominator scores 0.
    """
    counts = {status: 0 for status in ChecklistItemStatus}
    for item in items:
        counts[item.status] += 1

    passed = counts[ChecklistItemStatus.PASS]
    scored = passed + counts[ChecklistItemStatus.FAIL]
    if count_pending:
        scored += counts[ChecklistItemStatus.PENDING]

    score = percentage(passed, scored)
    return InspectionScore(
        score=score,
        status=derive_inspection_status(score),
        passed=passed,
        failed=counts[ChecklistItemStatus.FAIL],
        pending=counts[ChecklistItemStatus.PENDING],
        not_applicable=counts[ChecklistItemStatus.NA],
        scored=scored,
    )
