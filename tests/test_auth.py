"""Tests for registration, login and token handling."""
from datetime import timedelta

from app.schemas.auth import Identity
from app.utils.security import create_access_token, hash_password, verify_password

from conftest import TEST_USER


class TestRegister:

    def test_register_defaults_role_to_staff(self, client):
        response = client.post("/api/auth/register", json=TEST_USER)

        assert response.status_code == 201
        body = response.json()
        assert body["username"] == "clerk1"
        assert body["full_name"] == "Juan Dela Cruz"
        assert body["role"] == "Staff"
        assert "password_hash" not in body
        assert "password" not in body

    def test_register_with_explicit_role(self, client):
        response = client.post("/api/auth/register", json={**TEST_USER, "role": "Admin"})
        assert response.status_code == 201
        assert response.json()["role"] == "Admin"

    def test_register_missing_fields(self, client):
        response = client.post("/api/auth/register", json={"username": "clerk1"})
        assert response.status_code == 400
        assert response.json()["message"] == "username, password, and full_name are required."

    def test_register_duplicate_username(self, client):
        client.post("/api/auth/register", json=TEST_USER)
        response = client.post("/api/auth/register", json=TEST_USER)
        assert response.status_code == 400
        assert response.json()["message"] == "Username already taken."

    def test_register_username_too_long(self, client):
        response = client.post("/api/auth/register", json={**TEST_USER, "username": "u" * 51})
        assert response.status_code == 400
        assert "50 characters or less" in response.json()["message"]

    def test_register_role_too_long(self, client):
        response = client.post("/api/auth/register", json={**TEST_USER, "role": "R" * 51})
        assert response.status_code == 400
        assert response.json()["message"] == "Role must be 50 characters or less."

    def test_register_rejects_unknown_fields(self, client):
        response = client.post("/api/auth/register", json={**TEST_USER, "is_superuser": True})
        assert response.status_code == 400
        assert response.json()["message"] == "Unknown field: is_superuser."


class TestLogin:

    def test_login_returns_token_and_user(self, client):
        client.post("/api/auth/register", json=TEST_USER)
        response = client.post(
            "/api/auth/login",
            json={"username": "clerk1", "password": "pw123456"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["token"]
        assert body["user"]["full_name"] == "Juan Dela Cruz"
        assert body["user"]["role"] == "Staff"

    def test_wrong_password_and_unknown_user_look_the_same(self, client):
        client.post("/api/auth/register", json=TEST_USER)
        wrong_password = client.post(
            "/api/auth/login", json={"username": "clerk1", "password": "nope"}
        )
        unknown_user = client.post(
            "/api/auth/login", json={"username": "ghost", "password": "pw123456"}
        )

        assert wrong_password.status_code == 401
        assert unknown_user.status_code == 401
        assert wrong_password.json()["message"] == unknown_user.json()["message"]
        assert wrong_password.json()["message"] == "Invalid username or password"

    def test_login_missing_fields(self, client):
        response = client.post("/api/auth/login", json={"username": "clerk1"})
        assert response.status_code == 400
        assert response.json()["message"] == "username and password are required."


class TestSession:

    def test_me_echoes_identity(self, client, auth_headers):
        response = client.get("/api/auth/me", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["username"] == "clerk1"
        assert response.json()["role"] == "Staff"

    def test_raw_token_without_bearer_prefix(self, client, auth_headers):
        raw = auth_headers["Authorization"].split(" ", 1)[1]
        response = client.get("/api/auth/me", headers={"Authorization": raw})
        assert response.status_code == 200

    def test_missing_token(self, client):
        response = client.post("/api/residents", json={"first_name": "A", "last_name": "B", "sex": "Male"})
        assert response.status_code == 401
        assert response.json()["message"] == "No token provided"

    def test_invalid_token(self, client):
        response = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid or expired token"

    def test_expired_token(self, client):
        identity = Identity(id=1, username="clerk1", full_name="Juan Dela Cruz", role="Staff")
        token = create_access_token(identity, expires_delta=timedelta(hours=-25))

        response = client.post(
            "/api/residents",
            json={"first_name": "A", "last_name": "B", "sex": "Male"},
            headers={"Authorization": f"Bearer {token}"},
        )
        assert response.status_code == 401
        assert "expired" in response.json()["message"].lower()


class TestPasswordHashing:

    def test_hash_and_verify(self):
        hashed = hash_password("pw123456")
        assert hashed != "pw123456"
        assert verify_password("pw123456", hashed)
        assert not verify_password("wrong", hashed)

    def test_verify_with_garbage_hash(self):
        assert not verify_password("pw123456", "not-a-hash")
