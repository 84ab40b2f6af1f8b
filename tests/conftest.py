"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory database session, seeded users, auth headers, service mocks
Dependencies: pytest, sqlalchemy, aiosqlite, fastapi
System role: Test infrastructure and fixture management
"""

import os
import uuid
from unittest.mock import AsyncMock

import pytest

# Cheap hashing and a fixed signing key for every test; must precede mangaverse imports.
os.environ.setdefault("AUTH_BCRYPT_ROUNDS", "4")
os.environ.setdefault("AUTH_JWT_SECRET", "test-secret-for-mangaverse-suite")


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from mangaverse.boundary.db.base import Base
    import mangaverse.boundary.db.models  # noqa: F401  registers every table

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Create session factory
    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Create session for test
    async with async_session() as session:
        yield session
        await session.rollback()

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


async def _make_user(db, username: str, role: str = "user"):
    from mangaverse.boundary.db.CRUD.user_crud import user_crud
    from mangaverse.core.security import hash_password

    return await user_crud.create(
        db,
        username=username,
        email=f"{username}@example.com",
        password_hash=hash_password("secret123"),
        role=role,
    )


@pytest.fixture
async def reader(test_async_db):
    """A regular user row."""
    return await _make_user(test_async_db, "reader")


@pytest.fixture
async def admin_user(test_async_db):
    """An admin user row."""
    return await _make_user(test_async_db, "admin", role="admin")


def _token_for(user_id: uuid.UUID, username: str, role: str) -> str:
    from mangaverse.core.security import create_access_token

    return create_access_token(
        {
            "userId": str(user_id),
            "username": username,
            "email": f"{username}@example.com",
            "role": role,
        }
    )


@pytest.fixture
def user_id() -> uuid.UUID:
    """Generate a test user ID."""
    return uuid.uuid4()


@pytest.fixture
def user_headers(user_id) -> dict[str, str]:
    """Bearer header for a regular user."""
    return {"Authorization": f"Bearer {_token_for(user_id, 'reader', 'user')}"}


@pytest.fixture
def admin_headers() -> dict[str, str]:
    """Bearer header for an admin."""
    return {"Authorization": f"Bearer {_token_for(uuid.uuid4(), 'admin', 'admin')}"}


@pytest.fixture
def mock_mangadex():
    """
    Create mock MangaDexClient for testing.

    Returns:
        AsyncMock: Client with async lookup methods
    """
    client = AsyncMock()
    client.get_manga_list = AsyncMock(return_value={"data": [], "total": 0})
    client.search_manga = AsyncMock(return_value={"data": [], "total": 0})
    return client


@pytest.fixture
def mock_mangaplus():
    """
    Create mock MangaPlusClient for testing.

    Returns:
        AsyncMock: Client whose lookups return empty results
    """
    client = AsyncMock()
    client.get_all_titles = AsyncMock(return_value=[])
    client.get_title_detail = AsyncMock(return_value=None)
    client.get_chapter_pages = AsyncMock(return_value=[])
    return client
