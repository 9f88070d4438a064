"""
Integration Tests: Master Data Endpoints

Tests:
- GET /api/v1/master-data/products (+ detail, specs)
- Edit session lifecycle: open, edit, commit, discard
"""
from fastapi.testclient import TestClient

BASE = "/api/v1/master-data"


def _open(client: TestClient, product_id=None):
    resp = client.post(f"{BASE}/sessions", json={"product_id": product_id})
    assert resp.status_code == 201
    return resp.json()


class TestProducts:
    def test_list_products(self, client: TestClient):
        resp = client.get(f"{BASE}/products")
        assert resp.status_code == 200
        data = resp.json()
        assert [p["sku"] for p in data] == ["HYD-PUMP-X1", "ELEC-CIRC-V2"]
        assert data[0]["stage_count"] == 3
        assert data[1]["checklist_count"] == 5

    def test_specs(self, client: TestClient):
        resp = client.get(f"{BASE}/products/prod-2/specs")
        assert resp.status_code == 200
        assert "IP Rating: IP67" in resp.json()["text"]

    def test_unknown_product_returns_404(self, client: TestClient):
        assert client.get(f"{BASE}/products/prod-9").status_code == 404

    def test_categories(self, client: TestClient):
        resp = client.get(f"{BASE}/categories")
        assert resp.json()["categories"] == ["Dimensional", "Functional", "Packaging", "Visual"]


class TestEditSessions:
    def test_edits_stay_in_draft_until_commit(self, client: TestClient):
        session = _open(client, "prod-1")
        sid = session["session_id"]
        assert session["is_new"] is False

        resp = client.patch(f"{BASE}/sessions/{sid}", json={"version": "1.3", "name": "Hydraulic Pump X1b"})
        assert resp.status_code == 200
        assert client.get(f"{BASE}/products/prod-1").json()["version"] == "1.2"

        committed = client.post(f"{BASE}/sessions/{sid}/commit")
        assert committed.status_code == 200
        product = client.get(f"{BASE}/products/prod-1").json()
        assert product["version"] == "1.3"
        assert product["name"] == "Hydraulic Pump X1b"
        assert client.get(f"{BASE}/sessions/{sid}").status_code == 404

    def test_discard_leaves_product_untouched(self, client: TestClient):
        sid = _open(client, "prod-1")["session_id"]
        client.post(f"{BASE}/sessions/{sid}/stages", json={"name": "Polishing"})

        assert client.delete(f"{BASE}/sessions/{sid}").status_code == 204
        assert len(client.get(f"{BASE}/products/prod-1").json()["stages"]) == 3

    def test_new_product_is_added_on_commit(self, client: TestClient):
        session = _open(client)
        assert session["is_new"] is True
        assert session["draft"]["sku"] == "NEW-PROD"

        client.post(f"{BASE}/sessions/{session['session_id']}/commit")
        assert len(client.get(f"{BASE}/products").json()) == 3

    def test_bom_stage_and_checklist_editing(self, client: TestClient):
        sid = _open(client, "prod-1")["session_id"]

        line = client.post(f"{BASE}/sessions/{sid}/bom").json()
        assert line["inventory_item_id"] == "inv-3"

        changed = client.put(f"{BASE}/sessions/{sid}/bom/{line['id']}", json={"inventory_item_id": "inv-5"})
        assert changed.json()["inventory_item_name"] == "Industrial Paint (Black)"
        assert changed.json()["unit"] == "L"

        stage = client.post(f"{BASE}/sessions/{sid}/stages", json={}).json()
        assert stage["order"] == 4
        param = client.post(
            f"{BASE}/sessions/{sid}/stages/{stage['id']}/parameters",
            json={"name": "Grit", "target_value": "400"},
        )
        assert param.status_code == 201

        item = client.post(f"{BASE}/sessions/{sid}/checklist", json={"label": "Burr check", "category": "Edges"}).json()
        categories = client.get(f"{BASE}/sessions/{sid}/categories").json()["categories"]
        assert "Edges" in categories
        excluded = client.get(f"{BASE}/sessions/{sid}/categories?exclude_item_id={item['id']}").json()["categories"]
        assert "Edges" not in excluded

        draft = client.get(f"{BASE}/sessions/{sid}").json()["draft"]
        assert len(draft["bom"]) == 4
        assert draft["stages"][-1]["parameters"][0]["name"] == "Grit"

    def test_import_checklist(self, client: TestClient):
        sid = _open(client, "prod-1")["session_id"]
        resp = client.post(f"{BASE}/sessions/{sid}/checklist/import", json={"source_product_id": "prod-2"})
        assert resp.status_code == 200
        ids = [c["id"] for c in resp.json()]
        assert len(ids) == 9
        assert len(set(ids)) == 9
        assert "c5" not in ids

    def test_unknown_bom_item_returns_404(self, client: TestClient):
        sid = _open(client, "prod-1")["session_id"]
        resp = client.put(f"{BASE}/sessions/{sid}/bom/b1", json={"inventory_item_id": "inv-99"})
        assert resp.status_code == 404

    def test_invalid_draft_update_is_rejected(self, client: TestClient):
        sid = _open(client, "prod-1")["session_id"]
        resp = client.patch(f"{BASE}/sessions/{sid}", json={"sku": ""})
        assert resp.status_code == 422
