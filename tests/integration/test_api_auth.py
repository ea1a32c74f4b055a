"""
End-to-end tests for registration, login and the authentication gate.
"""
import time
from unittest.mock import AsyncMock

import pytest

from streetcats.core.security import create_jwt_token
from streetcats.domain.repositories import UserRepository

pytestmark = pytest.mark.integration


def register(client, email="a@b.com", password="secret1", name="Ann"):
    return client.post(
        "/api/v1/auth/register",
        json={"email": email, "password": password, "name": name},
    )


class TestRegister:

    def test_register_then_duplicate_email(self, client):
        response = register(client)
        assert response.status_code == 201
        body = response.json()
        assert body["userId"]
        assert body["message"]

        duplicate = register(client, email="A@B.COM", name="Other")
        assert duplicate.status_code == 400
        assert duplicate.json()["detail"]["error"] == "DuplicateEmail"

    def test_register_validation_errors_use_framework_422(self, client):
        response = register(client, password="123")
        assert response.status_code == 422

    def test_register_storage_failure_is_500_without_details(self, client, container, mock_settings, monkeypatch):
        repository = container.get(UserRepository)
        monkeypatch.setattr(
            repository, "find_by_email", AsyncMock(side_effect=RuntimeError("db password=hunter2"))
        )

        response = register(client)

        assert response.status_code == 500
        assert response.json()["detail"] == {
            "error": "InternalError",
            "message": "Internal server error",
        }


class TestLogin:

    def test_login_is_case_insensitive_and_hides_password(self, client):
        user_id = register(client).json()["userId"]

        response = client.post(
            "/api/v1/auth/login",
            json={"email": "A@B.com", "password": "secret1"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["token"].count(".") == 2
        assert body["user"] == {"id": user_id, "email": "a@b.com", "name": "Ann"}

    def test_wrong_password_and_unknown_email_look_the_same(self, client):
        register(client)

        wrong_password = client.post(
            "/api/v1/auth/login", json={"email": "a@b.com", "password": "nope12"}
        )
        unknown_email = client.post(
            "/api/v1/auth/login", json={"email": "z@b.com", "password": "secret1"}
        )

        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json()
        assert wrong_password.json()["detail"]["error"] == "InvalidCredentials"


class TestAuthenticationGate:

    def test_missing_header(self, client):
        response = client.get("/api/v1/auth/me")
        assert response.status_code == 401
        assert response.json()["detail"]["error"] == "MissingToken"
        assert response.headers["www-authenticate"] == "Bearer"

    def test_garbage_token(self, client):
        response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401
        assert response.json()["detail"]["error"] == "MalformedToken"

    def test_wrong_scheme(self, client):
        response = client.get("/api/v1/auth/me", headers={"Authorization": "Token abc"})
        assert response.status_code == 401
        assert response.json()["detail"]["error"] == "MalformedToken"

    def test_valid_token_resolves_identity(self, client, register_and_login):
        headers, user_id = register_and_login("me@example.com", name="Me")

        response = client.get("/api/v1/auth/me", headers=headers)

        assert response.status_code == 200
        assert response.json() == {"id": user_id, "email": "me@example.com", "name": "Me"}

    def test_expired_token(self, client, register_and_login):
        _, user_id = register_and_login("old@example.com")
        token = create_jwt_token(user_id, "old@example.com", issued_at=int(time.time()) - 7200)

        response = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["detail"]["error"] == "Expired"

    def test_token_for_deleted_user(self, client):
        token = create_jwt_token("0123456789abcdef01234567", "ghost@example.com")

        response = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["detail"]["error"] == "UnknownUser"
