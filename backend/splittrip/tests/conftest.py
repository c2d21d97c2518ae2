"""
Shared fixtures: in-memory SQLite database and API client helpers.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
import splittrip.models  # noqa: F401
from splittrip.db.base import Base
from splittrip.db.session import get_db
from splittrip.main import app

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def client():
    Base.metadata.create_all(bind=engine)
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def make_guest(client):
    """Create a guest user; returns (user_id, auth headers)."""
    def _make_guest(name: str):
        response = client.post("/api/auth/guest", json={"display_name": name})
        assert response.status_code == 201
        body = response.json()
        return body["user_id"], {"Authorization": f"Bearer {body['access_token']}"}
    return _make_guest


@pytest.fixture()
def trip_with_members(client, make_guest):
    """
    A trip created by Alice that Bob and Carol joined through join requests.
    Returns (trip dict, {name: (user_id, headers)}).
    """
    users = {name: make_guest(name) for name in ("Alice", "Bob", "Carol")}
    alice_headers = users["Alice"][1]

    trip = client.post("/api/trips", json={"name": "Goa"}, headers=alice_headers).json()
    for name in ("Bob", "Carol"):
        request = client.post(
            "/api/join-requests",
            json={"trip_code": trip["trip_code"]},
            headers=users[name][1]
        ).json()
        response = client.post(f"/api/join-requests/{request['id']}/approve", headers=alice_headers)
        assert response.status_code == 200
    return trip, users
