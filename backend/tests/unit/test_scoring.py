from app.core.scoring import compute_inspection_score, compute_score
from app.models.enums import ChecklistItemStatus, InspectionStatus
from app.models.quality import InspectionItem
from app.utils.rounding import percentage, round_half_up


def _items(*statuses):
    return [
        InspectionItem(id=f"i{n}", label=f"Check {n}", status=ChecklistItemStatus(status))
        for n, status in enumerate(statuses)
    ]


def test_na_items_leave_the_denominator():
    result = compute_inspection_score(_items("pass", "pass", "fail", "na"))

    assert result.scored == 3
    assert result.passed == 2
    assert result.not_applicable == 1
    assert result.score == 67
    assert result.status == InspectionStatus.FAIL


def test_all_pass_scores_100():
    result = compute_inspection_score(_items("pass", "pass", "pass", "pass"))
    assert result.score == 100
    assert result.status == InspectionStatus.PASS


def test_one_fail_in_four_is_conditional():
    result = compute_inspection_score(_items("pass", "pass", "pass", "fail"))
    assert result.score == 75
    assert result.status == InspectionStatus.CONDITIONAL


def test_pending_items_count_against_the_score_by_default():
    items = _items("pass", "pending")
    assert compute_score(items) == 50
    assert compute_score(items, count_pending=False) == 100


def test_empty_denominator_scores_zero():
    assert compute_score([]) == 0
    assert compute_score(_items("na", "na")) == 0


def test_half_rounds_up():
    # 5 of 8 passed is 62.5%
    assert compute_score(_items(*["pass"] * 5, *["fail"] * 3)) == 63
    assert round_half_up(2.5) == 3
    assert percentage(1, 0) == 0
