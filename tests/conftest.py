"""Pytest configuration and fixtures for test suite."""

import os
import sys
import tempfile
from pathlib import Path

import pytest

# Set test environment BEFORE any other imports
_test_dir = tempfile.mkdtemp(prefix="barangay-tests-")
os.environ["DATABASE_PATH"] = os.path.join(_test_dir, "test.db")
os.environ["UPLOAD_DIR"] = os.path.join(_test_dir, "uploads")
os.environ["USE_MYSQL"] = "false"
os.environ["JWT_SECRET"] = "test_secret"
os.environ["BCRYPT_ROUNDS"] = "4"

# Add project root to path for imports
root_path = Path(__file__).parent.parent
if str(root_path) not in sys.path:
    sys.path.insert(0, str(root_path))

from fastapi.testclient import TestClient  # noqa: E402

from app.database import Base, SessionLocal, engine, init_db  # noqa: E402
from app.main import app  # noqa: E402

TEST_USER = {
    "username": "clerk1",
    "password": "pw123456",
    "full_name": "Juan Dela Cruz",
}


@pytest.fixture(autouse=True)
def reset_database():
    """Recreate every table so each test starts from an empty database."""
    Base.metadata.drop_all(bind=engine)
    init_db()
    yield


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def auth_headers(client):
    """Register the test clerk and return a bearer header for them."""
    client.post("/api/auth/register", json=TEST_USER)
    response = client.post(
        "/api/auth/login",
        json={"username": TEST_USER["username"], "password": TEST_USER["password"]},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


def make_resident(client, headers, **overrides):
    """Create a resident through the API and return its JSON."""
    payload = {"first_name": "Maria", "last_name": "Santos", "sex": "Female"}
    payload.update(overrides)
    response = client.post("/api/residents", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def history_actions(client, headers):
    response = client.get("/api/history-logs", headers=headers)
    assert response.status_code == 200
    return [log["action"] for log in response.json()]
