"""
Tests for the /api/records HTTP surface (FastAPI TestClient).
"""

import pytest
from fastapi.testclient import TestClient

from vinylstock.api.app import app
from vinylstock.api.state import AppState, get_state
from vinylstock.core.record_store import RecordStore


@pytest.fixture
def client(store):
    state = AppState(store)
    app.dependency_overrides[get_state] = lambda: state
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestRecordsApi:

    def test_create_list_get(self, client, record_fields):
        created = client.post("/api/records/", json=record_fields)
        assert created.status_code == 201
        assert created.json() == {"record_id": 1, **record_fields}

        listed = client.get("/api/records/")
        assert listed.json() == [{
            "record_id": 1,
            "album_name": "Final Countdown",
            "band_name": "Europe",
            "quantity": 10,
            "price": 5,
        }]
        assert client.get("/api/records/1").json()["supplier_name"] == "Virgin"

    def test_form_text_counts(self, client, record_fields):
        body = {**record_fields, "quantity": "", "price": "12"}
        created = client.post("/api/records/", json=body).json()
        assert (created["quantity"], created["price"]) == (0, 12)

    def test_validation_error_422(self, client, store, record_fields):
        resp = client.post("/api/records/", json={**record_fields, "album_name": " "})
        assert resp.status_code == 422
        assert resp.json()["field"] == "album_name"
        assert store.count() == 0

    @pytest.mark.parametrize("field", ["quantity", "price"])
    def test_boolean_count_rejected(self, client, store, record_fields, field):
        resp = client.post("/api/records/", json={**record_fields, field: True})
        assert resp.status_code == 422
        assert store.count() == 0

    def test_boolean_delta_rejected(self, client, store, record_fields):
        client.post("/api/records/", json=record_fields)
        resp = client.post("/api/records/1/quantity", json={"delta": True})
        assert resp.status_code == 422
        assert store.get(1).quantity == 10

    def test_update(self, client, record_fields):
        client.post("/api/records/", json=record_fields)
        resp = client.put("/api/records/1", json={**record_fields, "price": 8})
        assert resp.status_code == 200
        assert resp.json()["price"] == 8

    def test_update_missing_404(self, client, record_fields):
        assert client.put("/api/records/5", json=record_fields).status_code == 404

    def test_sale_until_sold_out(self, client, record_fields):
        client.post("/api/records/", json={**record_fields, "quantity": 1})
        assert client.post("/api/records/1/sale").json() == {"record_id": 1, "quantity": 0}
        resp = client.post("/api/records/1/sale")
        assert resp.status_code == 409
        assert resp.json()["detail"] == "Sold out"

    def test_adjust_quantity(self, client, record_fields):
        client.post("/api/records/", json=record_fields)
        resp = client.post("/api/records/1/quantity", json={"delta": -1})
        assert resp.json()["quantity"] == 9

    def test_delete_one_and_missing(self, client, record_fields):
        client.post("/api/records/", json=record_fields)
        assert client.delete("/api/records/1").status_code == 204
        assert client.delete("/api/records/1").status_code == 404
        assert client.get("/api/records/1").status_code == 404

    def test_delete_all_and_sample(self, client):
        client.post("/api/records/sample")
        client.post("/api/records/sample")
        assert client.delete("/api/records/").json() == {"deleted": 2}
        assert client.get("/api/records/").json() == []

    def test_order(self, client, record_fields):
        client.post("/api/records/", json=record_fields)
        order = client.get("/api/records/1/order").json()
        assert order["to"] == "order@virgin.com"
        assert order["subject"] == "Order: Final Countdown by Europe"
        assert order["mailto"].startswith("mailto:order@virgin.com?subject=")


def test_store_unavailable_503(flaky_backend, record_fields):
    state = AppState(RecordStore(flaky_backend))
    app.dependency_overrides[get_state] = lambda: state
    try:
        flaky_backend.broken = True
        resp = TestClient(app).post("/api/records/", json=record_fields)
        assert resp.status_code == 503
    finally:
        app.dependency_overrides.clear()
