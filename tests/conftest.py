"""
Pytest configuration and shared fixtures.

Tests run against a fresh in-memory SQLite database per test function
(aiosqlite). The schema is created from SQLModel.metadata, the same source
scripts/init_db.py uses.
"""

import os

# Settings are read at import time; provide test defaults before importing app
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-with-at-least-32-bytes!")
os.environ.setdefault("ENVIRONMENT", "development")

from collections.abc import AsyncGenerator, Awaitable, Callable  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402

import app.models  # noqa: E402, F401  (registers tables)
from app.config import UserRole, UserStatus  # noqa: E402
from app.core.database import get_db  # noqa: E402
from app.core.security import create_access_token  # noqa: E402
from app.main import app as main_app  # noqa: E402
from app.models import Comments, CommentReports, Suggestions, Users, Words  # noqa: E402

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite://")


@pytest.fixture(scope="function")
async def engine():
    """
    Create a test database engine for each test function.

    StaticPool keeps the single in-memory SQLite connection alive for the
    whole test, so every session sees the same database.
    """
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine

    await test_engine.dispose()


@pytest.fixture(scope="function")
async def db_session(engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a new database session for each test."""
    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()


@pytest.fixture(scope="function")
def app(db_session: AsyncSession) -> FastAPI:
    """
    Create FastAPI app with test database session.

    The override keeps get_db's commit-or-rollback behaviour.
    """

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        try:
            yield db_session
            await db_session.commit()
        except Exception:
            await db_session.rollback()
            raise

    main_app.dependency_overrides[get_db] = override_get_db

    yield main_app

    main_app.dependency_overrides.clear()


@pytest.fixture(scope="function")
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """
    Create async HTTP client for testing API endpoints.

    Usage:
        async def test_endpoint(client):
            response = await client.get("/api/v1/words/active")
            assert response.status_code == 200
    """
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# =============================================================================
# Test Data Factories
# =============================================================================
# Each factory adds one row, commits, and returns the refreshed instance.


def _bearer(user: Users) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture
def auth_headers() -> Callable[[Users], dict[str, str]]:
    """
    Bearer header for any user, without going through /auth/login.

    Usage:
        async def test_something(client, make_user, auth_headers):
            user = await make_user()
            await client.get("/api/v1/auth/me", headers=auth_headers(user))
    """
    return _bearer


@pytest.fixture
def make_user(db_session: AsyncSession) -> Callable[..., Awaitable[Users]]:
    """
    Factory for users.

    Usage:
        async def test_something(make_user):
            user = await make_user(username="bob", warnings=1)
    """
    counter = {"n": 0}

    async def _make_user(**overrides: Any) -> Users:
        counter["n"] += 1
        n = counter["n"]
        values: dict[str, Any] = {
            "username": f"user{n}",
            "email": f"user{n}@example.com",
            "role": UserRole.USER,
            "status": UserStatus.ACTIVE,
        }
        values.update(overrides)
        user = Users(**values)
        db_session.add(user)
        await db_session.commit()
        await db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_word(db_session: AsyncSession) -> Callable[..., Awaitable[Words]]:
    counter = {"n": 0}

    async def _make_word(**overrides: Any) -> Words:
        counter["n"] += 1
        values: dict[str, Any] = {
            "text": f"word{counter['n']}",
            "definition": "A test definition",
            "status": "active",
        }
        values.update(overrides)
        word = Words(**values)
        db_session.add(word)
        await db_session.commit()
        await db_session.refresh(word)
        return word

    return _make_word


@pytest.fixture
def make_comment(db_session: AsyncSession) -> Callable[..., Awaitable[Comments]]:
    async def _make_comment(user_id: str, word_id: str = "some-word", **overrides: Any) -> Comments:
        values: dict[str, Any] = {"user_id": user_id, "word_id": word_id, "text": "Test comment"}
        values.update(overrides)
        comment = Comments(**values)
        db_session.add(comment)
        await db_session.commit()
        await db_session.refresh(comment)
        return comment

    return _make_comment


@pytest.fixture
def make_report(db_session: AsyncSession) -> Callable[..., Awaitable[CommentReports]]:
    async def _make_report(comment: Comments, reporter_id: str, **overrides: Any) -> CommentReports:
        values: dict[str, Any] = {
            "comment_id": comment.id,
            "reporter_id": reporter_id,
            "user_id": comment.user_id,
            "reason": "offensive",
        }
        values.update(overrides)
        report = CommentReports(**values)
        db_session.add(report)
        await db_session.commit()
        await db_session.refresh(report)
        return report

    return _make_report


@pytest.fixture
def make_suggestion(db_session: AsyncSession) -> Callable[..., Awaitable[Suggestions]]:
    async def _make_suggestion(user_id: str, **overrides: Any) -> Suggestions:
        values: dict[str, Any] = {
            "user_id": user_id,
            "text": "Wesh",
            "definition": "Greeting",
            "example": "Wesh, ça va ?",
            "origin": "Arabic",
        }
        values.update(overrides)
        suggestion = Suggestions(**values)
        db_session.add(suggestion)
        await db_session.commit()
        await db_session.refresh(suggestion)
        return suggestion

    return _make_suggestion


@pytest.fixture
async def admin_user(make_user) -> Users:
    return await make_user(username="admin", email="admin@example.com", role=UserRole.ADMIN)


@pytest.fixture
async def regular_user(make_user) -> Users:
    return await make_user(username="jean", email="jean@example.com")


@pytest.fixture
def admin_headers(admin_user: Users) -> dict[str, str]:
    return _bearer(admin_user)


@pytest.fixture
def user_headers(regular_user: Users) -> dict[str, str]:
    return _bearer(regular_user)
