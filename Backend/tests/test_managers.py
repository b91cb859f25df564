from fastapi.testclient import TestClient


def test_create_never_returns_credentials(client: TestClient, make_manager):
    created = make_manager()

    assert created["email"] == "claire.martin@example.com"
    assert "password" not in created
    assert "password_hash" not in created
    assert "password_salt" not in created

    fetched = client.get(f"/api/managers/{created['id']}").json()
    assert fetched["last_name"] == "Martin"
    assert fetched["first_name"] == "Claire"
    assert "password_hash" not in fetched


def test_invalid_email_is_rejected(client: TestClient):
    response = client.post(
        "/api/managers/",
        json={"last_name": "Martin", "first_name": "Claire", "email": "not-an-email", "password": "x"},
    )
    assert response.status_code == 400


def test_duplicate_email_is_conflict(client: TestClient, make_manager):
    make_manager()
    response = client.post(
        "/api/managers/",
        json={"last_name": "Other", "first_name": "Person", "email": "claire.martin@example.com", "password": "x"},
    )
    assert response.status_code == 409


def test_update_manager(client: TestClient, make_manager):
    created = make_manager()

    response = client.put(
        f"/api/managers/{created['id']}",
        json={"last_name": "Martin-Roy", "first_name": "Claire", "email": "claire.roy@example.com", "password": "n3w"},
    )
    assert response.status_code == 200
    assert response.json()["data"]["email"] == "claire.roy@example.com"


def test_update_requires_full_body(client: TestClient, make_manager):
    created = make_manager()
    response = client.put(f"/api/managers/{created['id']}", json={"last_name": "Only"})
    assert response.status_code == 400


def test_delete_unknown_manager(client: TestClient):
    assert client.delete("/api/managers/4242").status_code == 404


def test_manager_with_inspections_cannot_be_deleted(client: TestClient, make_type, make_manager, make_equipment, make_inspection):
    equipment = make_equipment(make_type()["id"])
    manager = make_manager()
    make_inspection(equipment["id"], manager["id"], "2025-01-10")

    assert client.delete(f"/api/managers/{manager['id']}").status_code == 409


def test_malformed_manager_id(client: TestClient):
    body = {"last_name": "Martin", "first_name": "Claire", "email": "claire@example.com", "password": "s3cret"}

    assert client.get("/api/managers/abc").status_code == 404
    assert client.get("/api/managers/99999999999999999999999").status_code == 404
    assert client.put("/api/managers/abc", json=body).status_code == 400
    assert client.delete("/api/managers/1.5").status_code == 400
