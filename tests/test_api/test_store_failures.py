"""Responses when the store itself fails (tables missing, connection lost, ...)."""
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from bandtrack.main import app
from bandtrack.database import get_db


@pytest.fixture
def broken_store(client):
    """Point the app at a database that has no tables."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Empty = sessionmaker(bind=engine)

    def override_get_db():
        db = Empty()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield client
    engine.dispose()


def test_list_failure_is_generic_500(broken_store):
    res = broken_store.get("/api/roster")
    assert res.status_code == 500
    assert res.json() == {"message": "Error fetching roster data."}
    assert "no such table" not in res.text


def test_insert_failure_is_generic_500(broken_store):
    res = broken_store.post("/api/instruments", json={"instrument_name": "Tuba", "instrument_number": "TU-1"})
    assert res.status_code == 500
    assert res.json() == {"message": "Error inserting new instrument data."}
    assert "instruments" not in res.text


def test_assignment_reference_check_failure_is_500(broken_store):
    res = broken_store.post("/api/assignments", json={"student_fk": 1, "instrument_fk": 1, "date_out": "2025-09-01"})
    assert res.status_code == 500
    assert res.json() == {"message": "Error inserting assignment data."}


def test_active_ids_failure(broken_store):
    res = broken_store.get("/api/assignments/active-ids")
    assert res.status_code == 500
    assert res.json() == {"message": "Error fetching active item IDs."}


def test_page_shows_load_error(broken_store):
    res = broken_store.get("/")
    assert res.status_code == 200
    assert "Error loading data. Check your server connection." in res.text
    assert "Failed to load assignment options. Check server connection." in res.text
