"""HTTP behaviour while the database is unreachable."""

import socket

import pytest
from sqlalchemy.exc import OperationalError

import docvault.main as main_module
from docvault.core.db import get_db
from docvault.main import app, lifespan


def connection_errors():
    return [
        OperationalError("SELECT 1", {}, ConnectionRefusedError("connection refused")),
        ConnectionRefusedError(111, "Connection refused"),
        OSError("Multiple exceptions: [Errno 111] Connect call failed"),
        socket.gaierror(-2, "Name or service not known"),
    ]


class UnreachableSession:
    """Сессия, которая падает при первом обращении к БД"""

    def __init__(self, error: Exception):
        self.error = error

    async def execute(self, *args, **kwargs):
        raise self.error

    async def rollback(self):
        pass


@pytest.fixture
def database_down(client):
    def _database_down(error: Exception):
        async def override_get_db():
            yield UnreachableSession(error)

        app.dependency_overrides[get_db] = override_get_db

    return _database_down


@pytest.mark.asyncio
@pytest.mark.parametrize("error", connection_errors(), ids=lambda e: type(e).__name__)
class TestDatabaseUnavailable:
    async def test_login_is_503(self, client, database_down, error):
        database_down(error)

        response = await client.post("/auth/login", json={"username": "alice", "password": "secret123"})

        assert response.status_code == 503
        assert response.json() == {"error": "Database unavailable"}

    async def test_authenticated_route_is_503(self, client, database_down, alice, auth_headers, error):
        headers = auth_headers(alice)
        database_down(error)

        response = await client.get("/documents", headers=headers)

        assert response.status_code == 503

    async def test_health_reports_degraded(self, client, database_down, error):
        database_down(error)

        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "degraded"
        assert response.json()["database"] == "down"


@pytest.mark.asyncio
@pytest.mark.parametrize("error", connection_errors(), ids=lambda e: type(e).__name__)
async def test_lifespan_survives_failed_table_creation(monkeypatch, caplog, error):
    async def failing_create_tables():
        raise error

    monkeypatch.setattr(main_module.settings, "create_tables_on_startup", True)
    monkeypatch.setattr(main_module, "create_tables", failing_create_tables)
    monkeypatch.setattr(main_module, "setup_logging", lambda: None)

    async with lifespan(app):
        pass

    assert "serving degraded API" in caplog.text
