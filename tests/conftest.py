"""
Shared pytest configuration
"""
import pytest
from fastapi.testclient import TestClient

from sportcenter.config import Settings
from sportcenter.main import create_app

ADMIN_EMAIL = "admin@nylose.se"
ADMIN_PASSWORD = "admin123"


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def settings(tmp_path):
    """In-memory database, one per test"""
    return Settings(
        database_url="sqlite://",
        upload_dir=str(tmp_path / "uploads"),
        jwt_secret="test-secret",
        admin_email=ADMIN_EMAIL,
        admin_password=ADMIN_PASSWORD,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Entering the client runs migrations and seeding"""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def db(app, client):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def admin_token(client):
    response = client.post(
        "/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
    )
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def admin_headers(admin_token):
    return auth_headers(admin_token)


@pytest.fixture
def member_payload():
    """Adult applicant, no guardian needed"""
    return {
        "email": "anna@example.com",
        "password": "hemligt1",
        "first_name": "Anna",
        "last_name": "Svensson",
        "personnummer": "19900101-1234",
        "phone": "070-123 45 67",
        "address": "Storgatan 1, Göteborg",
    }


@pytest.fixture
def registered_member(client, member_payload):
    """Registration response body of a fresh member"""
    response = client.post("/api/auth/register", json=member_payload)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def member_headers(registered_member):
    return auth_headers(registered_member["token"])
