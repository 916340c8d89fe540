# =============================================================================
# tests/api/test_auth.py - Authentication Endpoint Tests
# =============================================================================

from datetime import timedelta

from app.core.security import create_access_token
from app.db.repositories.user_repository import UserRepository


class TestRegister:
    """POST /api/auth/register"""

    def test_register_returns_user_without_password(self, client, user_credentials):
        response = client.post("/api/auth/register", json=user_credentials)

        assert response.status_code == 201
        body = response.json()
        assert body["email"] == user_credentials["email"]
        assert body["username"] == user_credentials["username"]
        assert body["is_active"] is True
        assert "password" not in body
        assert "password_hash" not in body

    def test_register_duplicate_email(self, client, registered_user, user_credentials):
        payload = dict(user_credentials, username="another")

        response = client.post("/api/auth/register", json=payload)

        assert response.status_code == 400
        assert response.json()["detail"] == "Email already registered"

    def test_register_duplicate_username(self, client, registered_user, user_credentials):
        payload = dict(user_credentials, email="other@posts.io")

        response = client.post("/api/auth/register", json=payload)

        assert response.status_code == 400
        assert response.json()["detail"] == "Username already taken"

    def test_register_weak_password(self, client, user_credentials):
        payload = dict(user_credentials, password="alllowercase1")

        response = client.post("/api/auth/register", json=payload)

        assert response.status_code == 422
        assert response.json()["errors"]["password"] == [
            "Password must contain at least one uppercase letter"
        ]

    def test_register_invalid_email(self, client, user_credentials):
        payload = dict(user_credentials, email="not-an-email")

        response = client.post("/api/auth/register", json=payload)

        assert response.status_code == 422
        assert "email" in response.json()["errors"]


class TestLogin:
    """POST /api/auth/login"""

    def test_login_returns_bearer_token(self, client, registered_user, user_credentials):
        response = client.post(
            "/api/auth/login",
            json={"email": user_credentials["email"], "password": user_credentials["password"]},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["token_type"] == "bearer"
        assert body["access_token"]

    def test_login_wrong_password(self, client, registered_user, user_credentials):
        response = client.post(
            "/api/auth/login",
            json={"email": user_credentials["email"], "password": "WrongPass1"},
        )

        assert response.status_code == 401

    def test_login_unknown_email(self, client):
        response = client.post(
            "/api/auth/login",
            json={"email": "nobody@posts.io", "password": "Secret123"},
        )

        assert response.status_code == 401


class TestCurrentUser:
    """GET /api/auth/me and token edge cases"""

    def test_me_returns_current_user(self, client, auth_headers, registered_user):
        response = client.get("/api/auth/me", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["id"] == registered_user["id"]

    def test_me_requires_token(self, client):
        response = client.get("/api/auth/me")

        assert response.status_code == 401

    def test_expired_token_is_rejected(self, client, registered_user):
        token = create_access_token(
            {"sub": str(registered_user["id"])}, expires_delta=timedelta(minutes=-1)
        )

        response = client.get("/api/posts", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_token_for_unknown_user_is_rejected(self, client):
        token = create_access_token({"sub": "999"})

        response = client.get("/api/posts", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_token_with_out_of_range_subject_is_rejected(self, client):
        token = create_access_token({"sub": "99999999999999999999"})

        response = client.get("/api/posts", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_token_for_deleted_user_is_rejected(self, client, auth_headers, registered_user, run_db):
        deleted = run_db(lambda session: UserRepository(session).delete(registered_user["id"]))
        assert deleted is True

        response = client.get("/api/posts", headers=auth_headers)

        assert response.status_code == 401

    def test_token_for_inactive_user_is_rejected(self, client, auth_headers, registered_user, run_db):
        async def deactivate(session):
            repository = UserRepository(session)
            user = await repository.get_by_id(registered_user["id"])
            user.deactivate()
            return await repository.update(user)

        user = run_db(deactivate)
        assert user.is_active is False

        response = client.get("/api/posts", headers=auth_headers)

        assert response.status_code == 401


def test_health_is_public(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
