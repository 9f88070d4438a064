"""
Integration Tests: Purchase Order Endpoints
"""
from fastapi.testclient import TestClient


class TestPurchaseOrders:
    def test_list_orders(self, client: TestClient):
        resp = client.get("/api/v1/purchase-orders")
        assert resp.status_code == 200
        assert len(resp.json()) == 5

    def test_filter_and_search(self, client: TestClient):
        assert [o["id"] for o in client.get("/api/v1/purchase-orders?status=Done").json()] == ["PO-2024-005"]
        assert [o["id"] for o in client.get("/api/v1/purchase-orders?search=stark").json()] == ["PO-2024-002"]

    def test_detail_reports_batching_and_materials(self, client: TestClient):
        resp = client.get("/api/v1/purchase-orders/PO-2024-003")
        assert resp.status_code == 200
        data = resp.json()
        assert data["planned_qty"] == 100
        assert data["available_qty"] == 300
        assert [b["id"] for b in data["batches"]] == ["BATCH-1001"]

        board = data["materials"][0]
        assert board["inventory_item_id"] == "inv-3"
        assert board["required"] == 300
        assert board["available"] == 2
        assert board["shortage"] == 298
        assert data["has_shortage"] is True

    def test_available_drops_after_batching(self, client: TestClient):
        client.post("/api/v1/production/batches", json={"po_id": "PO-2024-003", "quantity": 120})
        data = client.get("/api/v1/purchase-orders/PO-2024-003").json()
        assert data["available_qty"] == 180
        assert data["planned_qty"] == 220

    def test_order_without_product_has_no_materials(self, client: TestClient):
        data = client.get("/api/v1/purchase-orders/PO-2024-004").json()
        assert data["materials"] == []
        assert data["has_shortage"] is False

    def test_unknown_order_returns_404(self, client: TestClient):
        assert client.get("/api/v1/purchase-orders/PO-0").status_code == 404
