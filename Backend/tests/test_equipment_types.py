import pytest
from fastapi.testclient import TestClient


def test_empty_list_returns_message_object(client: TestClient):
    response = client.get("/api/equipment-types/")
    assert response.status_code == 200
    body = response.json()
    assert isinstance(body, dict)
    assert body["data"] == []
    assert body["message"]


def test_create_then_get_round_trip(client: TestClient, make_type):
    created = make_type(label="Harness", interval=180, textile=True)

    response = client.get(f"/api/equipment-types/{created['id']}")
    assert response.status_code == 200
    body = response.json()
    assert body["label"] == "Harness"
    assert body["inspection_interval_days"] == 180
    assert body["is_textile"] is True
    assert body["mandatory_retirement_years"] == 10


def test_non_textile_type_has_no_retirement_rule(client: TestClient, make_type):
    created = make_type(label="Helmet", interval=365, textile=False)
    assert created["mandatory_retirement_years"] is None


def test_list_returns_array_when_rows_exist(client: TestClient, make_type):
    make_type(label="Helmet", interval=365, textile=False)
    make_type(label="Harness")

    body = client.get("/api/equipment-types/").json()
    assert [t["label"] for t in body] == ["Harness", "Helmet"]


def test_interval_must_be_positive(client: TestClient):
    response = client.post(
        "/api/equipment-types/",
        json={"label": "Gloves", "inspection_interval_days": 0, "is_textile": False},
    )
    assert response.status_code == 400
    assert response.json()["success"] is False
    assert "inspection_interval_days" in response.json()["message"]


def test_missing_label_is_rejected(client: TestClient):
    response = client.post("/api/equipment-types/", json={"inspection_interval_days": 30})
    assert response.status_code == 400


def test_update_replaces_fields(client: TestClient, make_type):
    created = make_type()

    response = client.put(
        f"/api/equipment-types/{created['id']}",
        json={"label": "Fall arrest harness", "inspection_interval_days": 365},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["label"] == "Fall arrest harness"
    assert data["inspection_interval_days"] == 365
    assert data["is_textile"] is False


def test_update_unknown_id_is_not_found(client: TestClient):
    response = client.put(
        "/api/equipment-types/999",
        json={"label": "Helmet", "inspection_interval_days": 365, "is_textile": False},
    )
    assert response.status_code == 404


def test_malformed_id(client: TestClient):
    body = {"label": "Helmet", "inspection_interval_days": 365, "is_textile": False}
    assert client.get("/api/equipment-types/abc").status_code == 404
    assert client.put("/api/equipment-types/abc", json=body).status_code == 400
    assert client.delete("/api/equipment-types/abc").status_code == 400


@pytest.mark.parametrize("raw_id", ["0", "-3", "2147483648", "99999999999999999999999"])
def test_out_of_range_id_is_malformed(client: TestClient, raw_id):
    body = {"label": "Helmet", "inspection_interval_days": 365, "is_textile": False}
    assert client.get(f"/api/equipment-types/{raw_id}").status_code == 404
    assert client.put(f"/api/equipment-types/{raw_id}", json=body).status_code == 400
    assert client.delete(f"/api/equipment-types/{raw_id}").status_code == 400


def test_interval_has_an_upper_bound(client: TestClient):
    response = client.post(
        "/api/equipment-types/",
        json={"label": "Harness", "inspection_interval_days": 5000000, "is_textile": True},
    )
    assert response.status_code == 400
    assert "inspection_interval_days" in response.json()["message"]


def test_delete_then_delete_again(client: TestClient, make_type):
    created = make_type()

    assert client.delete(f"/api/equipment-types/{created['id']}").status_code == 200
    assert client.get(f"/api/equipment-types/{created['id']}").status_code == 404
    assert client.delete(f"/api/equipment-types/{created['id']}").status_code == 404


def test_delete_type_still_in_use_is_refused(client: TestClient, make_type, make_equipment):
    created = make_type()
    make_equipment(created["id"])

    response = client.delete(f"/api/equipment-types/{created['id']}")
    assert response.status_code == 409
    assert client.get(f"/api/equipment-types/{created['id']}").status_code == 200
