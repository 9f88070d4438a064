import pytest

from app.core.exceptions import ValidationException
from app.core.inventory import (
    StockEdit,
    apply_bulk_stock_edits,
    build_inventory_item,
    bulk_edit_candidates,
    filter_items,
    find_invalid_stock_edits,
    summarize_inventory,
)
from app.models.enums import InventoryStatus
from app.models.inventory import InventoryItem


def _item(item_id, stock, max_stock, **kwargs):
    data = {"sku": f"SKU-{item_id}", "name": f"Item {item_id}", "value": 1.0}
    data.update(kwargs)
    return InventoryItem(id=item_id, stock=stock, max_stock=max_stock, **data)


class TestBuildInventoryItem:
    def test_blank_fields_get_form_defaults(self):
        item = build_inventory_item("inv-x", {"sku": "NEW-1", "name": "New", "stock": "", "max_stock": 0})

        assert item.category == "General"
        assert item.unit == "pcs"
        assert item.stock == 0
        assert item.max_stock == 100
        assert item.status == InventoryStatus.CRITICAL

    def test_missing_sku_and_name_rejected(self):
        with pytest.raises(ValidationException) as exc:
            build_inventory_item("inv-x", {"sku": "  ", "stock": 5})
        assert exc.value.details == {"missing_fields": ["sku", "name"]}

    def test_status_follows_stock(self):
        item = build_inventory_item("inv-x", {"sku": "A", "name": "A", "stock": 25, "max_stock": 100})
        assert item.status == InventoryStatus.LOW
        assert item.model_copy(update={"stock": 90}).status == InventoryStatus.OK


class TestBulkStockEdits:
    def test_one_bad_row_rejects_the_whole_batch(self):
        items = [_item("a", 10, 100), _item("b", 10, 50)]
        edits = [StockEdit("a", 90), StockEdit("b", 60)]

        with pytest.raises(ValidationException) as exc:
            apply_bulk_stock_edits(items, edits)

        rows = exc.value.details["invalid_rows"]
        assert [r["id"] for r in rows] == ["b"]
        assert rows[0]["reason"] == "exceeds_max_stock"
        assert [i.stock for i in items] == [10, 10]

    def test_valid_batch_returns_new_records(self):
        items = [_item("a", 10, 100), _item("b", 10, 50)]
        updated = apply_bulk_stock_edits(items, [StockEdit("a", 90), StockEdit("b", 5)])

        assert [i.stock for i in updated] == [90, 5]
        assert [i.status for i in updated] == [InventoryStatus.OK, InventoryStatus.CRITICAL]
        assert items[0].stock == 10

    def test_later_edit_wins(self):
        updated = apply_bulk_stock_edits([_item("a", 10, 100)], [StockEdit("a", 40), StockEdit("a", 70)])
        assert updated[0].stock == 70

    def test_reports_unknown_and_negative_rows(self):
        invalid = find_invalid_stock_edits([_item("a", 10, 100)], [StockEdit("zz", 1), StockEdit("a", -1)])
        assert [r["reason"] for r in invalid] == ["not_found", "negative_stock"]

    def test_stock_equal_to_max_is_allowed(self):
        assert find_invalid_stock_edits([_item("a", 10, 100)], [StockEdit("a", 100)]) == []


class TestQueries:
    def test_filter_by_status_and_search(self):
        items = [
            _item("a", 10, 100, name="Steel Sheet", category="Raw Materials"),
            _item("b", 90, 100, name="Bolt"),
        ]
        assert [i.id for i in filter_items(items, status="Critical")] == ["a"]
        assert [i.id for i in filter_items(items, status="All", search="raw")] == ["a"]
        assert [i.id for i in filter_items(items, search="sku-b")] == ["b"]

    def test_bulk_candidates_skip_selected(self):
        items = [_item("a", 1, 10), _item("b", 1, 10), _item("c", 1, 10, name="Gasket")]
        assert [i.id for i in bulk_edit_candidates(items, ["a"])] == ["b", "c"]
        assert [i.id for i in bulk_edit_candidates(items, [], search="gask")] == ["c"]

    def test_summary(self):
        items = [_item("a", 10, 100, value=2.5), _item("b", 80, 100, value=1.0)]
        summary = summarize_inventory(items)

        assert summary.item_count == 2
        assert summary.total_value == 105.0
        assert summary.low_stock_count == 1
        assert summary.status_counts == {"OK": 1, "Low": 0, "Critical": 1}
