import os
from typing import Generator

import pytest
from fastapi.testclient import TestClient

# the module-level app never connects; tests build their own engine
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "testsecret")
os.environ.setdefault("APP_ENV", "test")

from ppe_tracker.main import create_app  # noqa: E402
from ppe_tracker.database import Base, create_db_engine, create_session_factory, init_db  # noqa: E402


@pytest.fixture(scope="session")
def engine(tmp_path_factory):
    db_file = tmp_path_factory.mktemp("db") / "test_ppe_tracker.db"
    engine = create_db_engine(f"sqlite:///{db_file}")
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def client(engine) -> Generator[TestClient, None, None]:
    Base.metadata.drop_all(bind=engine)
    app = create_app(engine)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def db(engine):
    Base.metadata.drop_all(bind=engine)
    session_factory = create_session_factory(engine)
    init_db(engine, session_factory)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def make_type(client: TestClient):
    def _make(label="Harness", interval=180, textile=True):
        response = client.post(
            "/api/equipment-types/",
            json={"label": label, "inspection_interval_days": interval, "is_textile": textile},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture()
def make_manager(client: TestClient):
    def _make(email="claire.martin@example.com", password="s3cret"):
        response = client.post(
            "/api/managers/",
            json={"last_name": "Martin", "first_name": "Claire", "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture()
def make_equipment(client: TestClient):
    def _make(equipment_type_id, **fields):
        payload = {
            "personal_id": "HARN-001",
            "brand": "Petzl",
            "model": "Avao Bod",
            "serial_number": "SN-0001",
            "equipment_type_id": equipment_type_id,
        }
        payload.update(fields)
        response = client.post("/api/equipment/", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture()
def make_inspection(client: TestClient):
    def _make(equipment_id, manager_id, inspection_date, status_id=1, remarks=None):
        response = client.post(
            "/api/inspections/",
            json={
                "inspection_date": str(inspection_date),
                "remarks": remarks,
                "manager_id": manager_id,
                "equipment_id": equipment_id,
                "status_id": status_id,
            },
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _make
