"""
Shared fixtures for DocVault tests.

The application reads its settings at import time, so the environment is
prepared before anything from ``docvault`` is imported. Every test gets its
own in-memory SQLite database (aiosqlite + StaticPool) and an in-memory
storage backend; the FastAPI app is wired to both through
``dependency_overrides``.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("STORAGE_BACKEND", "memory")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import docvault.db.models  # noqa: F401
from docvault.core.db import Base, get_db
from docvault.core.security import create_access_token
from docvault.db.repositories.user_repository import UserRepository
from docvault.domains.identity.entities import User, UserRole
from docvault.infrastructure.storage import MemoryBackend, get_storage
from docvault.main import app


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def storage():
    return MemoryBackend()


@pytest_asyncio.fixture
async def client(session_factory, storage):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage] = lambda: storage

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


async def _create_user(session, username: str, role: UserRole = UserRole.USER) -> User:
    return await UserRepository(session).create(
        User.create_user(username=username, password="secret123", role=role)
    )


@pytest_asyncio.fixture
async def alice(session) -> User:
    return await _create_user(session, "alice")


@pytest_asyncio.fixture
async def bob(session) -> User:
    return await _create_user(session, "bob")


@pytest_asyncio.fixture
async def admin(session) -> User:
    return await _create_user(session, "root", UserRole.ADMIN)


def _auth_headers(user: User) -> dict:
    token = create_access_token({"sub": str(user.uuid), "username": user.username, "role": user.role.value})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers():
    """Bearer headers for a given user"""
    return _auth_headers
