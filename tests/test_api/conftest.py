import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from bandtrack.main import app
from bandtrack.database import Base, enable_sqlite_foreign_keys, get_db
from bandtrack.client import BandApiClient

TEST_DB_URL = "sqlite:///:memory:"


@pytest.fixture(scope="function")
def session_factory():
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,  # Ensure all connections share same in-memory DB
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(engine)
    yield sessionmaker(bind=engine)
    Base.metadata.drop_all(engine)


@pytest.fixture(scope="function")
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app, follow_redirects=True) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def api(client):
    """BandApiClient talking to the app through the TestClient transport."""
    return BandApiClient(client, prefix="/api")


@pytest.fixture
def student(client):
    res = client.post("/api/roster", json={"full_name": "Jane Doe", "graduation_year": 2027, "instrument_played": "Flute"})
    return res.json()["id"]


@pytest.fixture
def instrument(client):
    res = client.post("/api/instruments", json={"instrument_name": "Flute", "instrument_number": "FL-1", "locker_number": "12"})
    return res.json()["id"]


@pytest.fixture
def uniform(client):
    res = client.post("/api/uniforms", json={"item_type": "Jacket", "item_number": "J-1", "size": "M", "status": "Good"})
    return res.json()["id"]
