import pytest

from app.core.status import derive_inspection_status, derive_inventory_status
from app.models.enums import InspectionStatus, InventoryStatus

SEVERITY = {InventoryStatus.CRITICAL: 2, InventoryStatus.LOW: 1, InventoryStatus.OK: 0}


@pytest.mark.parametrize(
    "stock,max_stock,expected",
    [
        (0, 100, InventoryStatus.CRITICAL),
        (20, 100, InventoryStatus.CRITICAL),
        (21, 100, InventoryStatus.LOW),
        (30, 100, InventoryStatus.LOW),
        (31, 100, InventoryStatus.OK),
        (150, 100, InventoryStatus.OK),
        (2, 10, InventoryStatus.CRITICAL),
        (3, 10, InventoryStatus.LOW),
    ],
)
def test_inventory_status_bands(stock, max_stock, expected):
    assert derive_inventory_status(stock, max_stock) == expected


@pytest.mark.parametrize("stock", [0, 5, 1000])
def test_zero_capacity_is_always_ok(stock):
    assert derive_inventory_status(stock, 0) == InventoryStatus.OK


def test_severity_never_increases_with_stock():
    severities = [SEVERITY[derive_inventory_status(stock, 100)] for stock in range(0, 201)]
    assert severities == sorted(severities, reverse=True)


@pytest.mark.parametrize(
    "score,expected",
    [
        (100, InspectionStatus.PASS),
        (99, InspectionStatus.CONDITIONAL),
        (70, InspectionStatus.CONDITIONAL),
        (69, InspectionStatus.FAIL),
        (0, InspectionStatus.FAIL),
    ],
)
def test_inspection_status_thresholds(score, expected):
    assert derive_inspection_status(score) == expected
