from fastapi.testclient import TestClient


def test_empty_inspection_list_returns_message(client: TestClient):
    response = client.get("/api/inspections/")
    assert response.status_code == 200
    body = response.json()
    assert not isinstance(body, list)
    assert body["message"]
    assert body["data"] == []


def test_create_returns_embedded_relations(client: TestClient, make_type, make_equipment, make_manager, make_inspection):
    equipment = make_equipment(make_type()["id"])
    manager = make_manager()

    created = make_inspection(equipment["id"], manager["id"], "2025-03-04", status_id=2, remarks="Frayed strap")

    assert created["inspection_date"] == "2025-03-04"
    assert created["remarks"] == "Frayed strap"
    assert created["equipment"] == {
        "id": equipment["id"], "personal_id": "HARN-001", "brand": "Petzl", "model": "Avao Bod",
    }
    assert created["manager"] == {"id": manager["id"], "last_name": "Martin", "first_name": "Claire"}
    assert created["status"] == {"id": 2, "label": "Needs repair"}

    fetched = client.get(f"/api/inspections/{created['id']}").json()
    assert fetched["status_id"] == 2
    assert fetched["equipment_id"] == equipment["id"]


def test_unknown_references_are_rejected(client: TestClient, make_type, make_equipment):
    equipment = make_equipment(make_type()["id"])

    response = client.post(
        "/api/inspections/",
        json={"inspection_date": "2025-03-04", "manager_id": 77, "equipment_id": equipment["id"], "status_id": 99},
    )
    assert response.status_code == 400
    message = response.json()["message"]
    assert "manager 77" in message
    assert "inspection status 99" in message


def test_missing_date_is_rejected(client: TestClient):
    response = client.post("/api/inspections/", json={"manager_id": 1, "equipment_id": 1, "status_id": 1})
    assert response.status_code == 400
    assert "inspection_date" in response.json()["message"]


def test_history_for_equipment_newest_first(client: TestClient, make_type, make_equipment, make_manager, make_inspection):
    type_id = make_type()["id"]
    first = make_equipment(type_id, serial_number="A")
    other = make_equipment(type_id, serial_number="B")
    manager = make_manager()
    make_inspection(first["id"], manager["id"], "2024-01-01")
    make_inspection(first["id"], manager["id"], "2025-01-01")
    make_inspection(other["id"], manager["id"], "2025-02-01")

    history = client.get(f"/api/inspections/equipment/{first['id']}").json()
    assert [i["inspection_date"] for i in history] == ["2025-01-01", "2024-01-01"]

    empty = client.get("/api/inspections/equipment/999").json()
    assert empty["data"] == []


def test_update_and_delete(client: TestClient, make_type, make_equipment, make_manager, make_inspection):
    equipment = make_equipment(make_type()["id"])
    manager = make_manager()
    created = make_inspection(equipment["id"], manager["id"], "2025-03-04", remarks="ok")

    response = client.put(
        f"/api/inspections/{created['id']}",
        json={"inspection_date": "2025-03-05", "manager_id": manager["id"], "equipment_id": equipment["id"], "status_id": 3},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["inspection_date"] == "2025-03-05"
    assert data["remarks"] is None
    assert data["status"]["label"] == "Scrapped"

    assert client.delete(f"/api/inspections/{created['id']}").status_code == 200
    assert client.get(f"/api/inspections/{created['id']}").status_code == 404
    assert client.delete(f"/api/inspections/{created['id']}").status_code == 404


def test_equipment_with_inspections_cannot_be_deleted(
    client: TestClient, make_type, make_equipment, make_manager, make_inspection
):
    equipment = make_equipment(make_type()["id"])
    make_inspection(equipment["id"], make_manager()["id"], "2025-03-04")

    assert client.delete(f"/api/equipment/{equipment['id']}").status_code == 409


def test_out_of_range_references_are_rejected(client: TestClient, make_type, make_equipment):
    equipment = make_equipment(make_type()["id"])

    for manager_id in (0, 99999999999999999999999):
        response = client.post(
            "/api/inspections/",
            json={"inspection_date": "2025-03-04", "manager_id": manager_id, "equipment_id": equipment["id"], "status_id": 1},
        )
        assert response.status_code == 400
        assert "manager_id" in response.json()["message"]


def test_malformed_inspection_id_on_update(client: TestClient):
    response = client.put(
        "/api/inspections/xyz",
        json={"inspection_date": "2025-03-04", "manager_id": 1, "equipment_id": 1, "status_id": 1},
    )
    assert response.status_code == 400
