"""
Integration Tests: Schedule Timeline Endpoint
"""
from fastapi.testclient import TestClient


class TestScheduleTimeline:
    def test_week_view(self, client: TestClient):
        resp = client.get("/api/v1/schedule/timeline?anchor=2024-03-13&view_mode=week")
        assert resp.status_code == 200
        data = resp.json()
        assert data["window_start"] == "2024-03-11"
        assert data["window_end"] == "2024-03-17"
        assert data["total_days"] == 7
        assert data["prev_anchor"] == "2024-03-06"
        assert len(data["lines"]) == 6

        bars = {p["task"]["id"]: (p["offset_days"], p["duration_days"]) for p in data["placements"]}
        assert bars["t1"] == (0, 3)
        assert bars["t5"] == (0, 1)
        assert bars["t4"] == (3, 2)

    def test_month_view(self, client: TestClient):
        data = client.get("/api/v1/schedule/timeline?anchor=2024-03-13&view_mode=month").json()
        assert data["total_days"] == 31
        assert data["next_anchor"] == "2024-04-01"
        assert len(data["placements"]) == 5

    def test_filter_by_line(self, client: TestClient):
        data = client.get("/api/v1/schedule/timeline?anchor=2024-03-13&line_id=L1").json()
        assert [line["id"] for line in data["lines"]] == ["L1"]
        assert [p["task"]["id"] for p in data["placements"]] == ["t2"]

    def test_unknown_view_mode_returns_400(self, client: TestClient):
        resp = client.get("/api/v1/schedule/timeline?view_mode=year")
        assert resp.status_code == 400
