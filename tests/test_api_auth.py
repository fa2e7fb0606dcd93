"""HTTP tests for registration, login and the current-user endpoint."""

import pytest

from docvault.core.config import settings


@pytest.mark.asyncio
class TestRegister:
    async def test_register_and_login(self, client):
        response = await client.post("/auth/register", json={"username": "carol", "password": "hunter22"})
        assert response.status_code == 201
        body = response.json()
        assert body["username"] == "carol"
        assert body["role"] == "user"
        assert "password" not in body and "password_hash" not in body

        response = await client.post("/auth/login", json={"username": "carol", "password": "hunter22"})
        assert response.status_code == 200
        token = response.json()["access_token"]
        assert response.json()["token_type"] == "bearer"

        response = await client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200
        assert response.json()["username"] == "carol"

    async def test_duplicate_username_rejected(self, client, alice):
        response = await client.post("/auth/register", json={"username": "alice", "password": "another1"})
        assert response.status_code == 400
        assert "taken" in response.json()["detail"]

    async def test_invalid_payload_is_400(self, client):
        response = await client.post("/auth/register", json={"username": "x", "password": "1"})
        assert response.status_code == 400
        assert response.json()["error"] == "Validation error"

    async def test_admin_self_registration_forbidden_by_default(self, client):
        response = await client.post(
            "/auth/register", json={"username": "mallory", "password": "secret123", "role": "admin"}
        )
        assert response.status_code == 403

    async def test_admin_self_registration_when_allowed(self, client, monkeypatch):
        monkeypatch.setattr(settings, "allow_admin_registration", True)
        response = await client.post(
            "/auth/register", json={"username": "boss", "password": "secret123", "role": "admin"}
        )
        assert response.status_code == 201
        assert response.json()["role"] == "admin"


@pytest.mark.asyncio
class TestLogin:
    async def test_wrong_password(self, client, alice):
        response = await client.post("/auth/login", json={"username": "alice", "password": "wrong-pass"})
        assert response.status_code == 401

    async def test_unknown_user(self, client):
        response = await client.post("/auth/login", json={"username": "nobody", "password": "secret123"})
        assert response.status_code == 401

    async def test_me_requires_token(self, client):
        assert (await client.get("/auth/me")).status_code == 401

    async def test_me_rejects_garbage_token(self, client):
        response = await client.get("/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 401
