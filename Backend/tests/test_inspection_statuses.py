from fastapi.testclient import TestClient


def test_default_statuses_are_seeded(client: TestClient):
    body = client.get("/api/inspection-statuses/").json()
    assert [s["label"] for s in body] == ["Operational", "Needs repair", "Scrapped"]


def test_status_crud(client: TestClient):
    created = client.post("/api/inspection-statuses/", json={"label": "Quarantined"})
    assert created.status_code == 201
    status_id = created.json()["id"]

    updated = client.put(f"/api/inspection-statuses/{status_id}", json={"label": "On hold"})
    assert updated.status_code == 200
    assert updated.json()["data"]["label"] == "On hold"

    assert client.get(f"/api/inspection-statuses/{status_id}").json()["label"] == "On hold"
    assert client.delete(f"/api/inspection-statuses/{status_id}").status_code == 200
    assert client.delete(f"/api/inspection-statuses/{status_id}").status_code == 404


def test_status_in_use_cannot_be_deleted(client: TestClient, make_type, make_manager, make_equipment, make_inspection):
    equipment = make_equipment(make_type()["id"])
    manager = make_manager()
    make_inspection(equipment["id"], manager["id"], "2025-01-10", status_id=2)

    assert client.delete("/api/inspection-statuses/2").status_code == 409


def test_empty_label_is_rejected(client: TestClient):
    assert client.post("/api/inspection-statuses/", json={"label": ""}).status_code == 400
