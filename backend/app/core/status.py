"""
Status derivation. Pure functions, no I/O.

Stored records never carry their own status; these functions are the single
place the thresholds live.
"""
from app.models.enums import InspectionStatus, InventoryStatus

CRITICAL_STOCK_RATIO = 0.2
LOW_STOCK_RATIO = 0.3

PASS_SCORE = 100
CONDITIONAL_MIN_SCORE = 70


def derive_inventory_status(stock: float, max_stock: float) -> InventoryStatus:
    """Classify stock against capacity; boundaries are inclusive on the lower band."""
    if not max_stock or max_stock <= 0:
        return InventoryStatus.OK
    ratio = stock / max_stock
    if ratio <= CRITICAL_STOCK_RATIO:
        return InventoryStatus.CRITICAL
    if ratio <= LOW_STOCK_RATIO:
        return InventoryStatus.LOW
    return InventoryStatus.OK


def derive_inspection_status(score: int) -> InspectionStatus:
    if score >= PASS_SCORE:
        return InspectionStatus.PASS
    if score >= CONDITIONAL_MIN_SCORE:
        return InspectionStatus.CONDITIONAL
    return InspectionStatus.FAIL
