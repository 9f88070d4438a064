"""
Integration Tests: Dashboard and Health Endpoints
"""
from fastapi.testclient import TestClient


class TestDashboard:
    def test_summary(self, client: TestClient):
        resp = client.get("/api/v1/dashboard/summary")
        assert resp.status_code == 200
        data = resp.json()
        assert data["low_stock_count"] == 4
        assert data["active_batches"] == 1
        assert data["open_orders"] == 4
        assert data["inspections_total"] == 4
        assert data["inspection_pass_rate"] == 50
        assert len(data["production_output"]) == 5

    def test_summary_tracks_inventory_changes(self, client: TestClient):
        client.put("/api/v1/inventory/inv-3", json={"stock": 90})
        assert client.get("/api/v1/dashboard/summary").json()["low_stock_count"] == 3


class TestHealth:
    def test_health(self, client: TestClient):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"

    def test_ready(self, client: TestClient):
        resp = client.get("/ready")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ready"

    def test_request_id_is_echoed(self, client: TestClient):
        resp = client.get("/health", headers={"X-Request-ID": "req-123"})
        assert resp.headers["X-Request-ID"] == "req-123"
        assert resp.headers["X-Content-Type-Options"] == "nosniff"
