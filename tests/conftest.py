"""Pytest configuration and fixtures for the registry service.

HTTP tests run registry.main:app over ASGI with the resource services
overridden to use in-memory stores and an isolated MemoryCache, so they
need neither Postgres nor Redis. Repository tests use db_session and are
marked requires_db.
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from registry.api.v1.dependencies import get_book_service, get_player_service
from registry.application.services.book_service import BookService
from registry.application.services.player_service import PlayerService
from registry.infrastructure.cache.memory_cache import MemoryCache
from registry.infrastructure.persistence import database
from registry.infrastructure.persistence.mappers import BookMapper, PlayerMapper
from registry.main import app
from tests.fakes import InMemoryBookStore, InMemoryPlayerStore


@pytest.fixture
def cache() -> MemoryCache:
    """Fresh cache per test; nothing leaks between tests."""
    return MemoryCache()


@pytest.fixture
def book_store() -> InMemoryBookStore:
    return InMemoryBookStore()


@pytest.fixture
def player_store() -> InMemoryPlayerStore:
    return InMemoryPlayerStore()


@pytest.fixture
def book_service(book_store: InMemoryBookStore, cache: MemoryCache) -> BookService:
    return BookService(book_store, cache, BookMapper())


@pytest.fixture
def player_service(
    player_store: InMemoryPlayerStore, cache: MemoryCache
) -> PlayerService:
    return PlayerService(player_store, cache, PlayerMapper())


@pytest.fixture
async def client(
    book_service: BookService,
    player_service: PlayerService,
    cache: MemoryCache,
) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) with in-memory stores."""
    app.state.cache = cache
    app.dependency_overrides[get_book_service] = lambda: book_service
    app.dependency_overrides[get_player_service] = lambda: player_service
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
        app.state.cache = None


@pytest.fixture
async def db_session() -> AsyncSession:
    """Database session for repository/integration tests. Rolls back after test.

    Requires DATABASE_URL pointing at a migrated Postgres database. Skips
    (pytest.skip) when it is not reachable. Use @pytest.mark.requires_db to
    mark tests that need this fixture; run without DB via:
    pytest -m 'not requires_db'.
    """
    database._ensure_engine()
    assert database.AsyncSessionLocal is not None
    session = database.AsyncSessionLocal()
    try:
        await session.execute(text("SELECT 1"))
    except Exception as exc:
        await session.close()
        await database.dispose_engine()
        pytest.skip(f"Postgres not reachable ({exc}); set DATABASE_URL and run: alembic upgrade head")
    try:
        yield session
    finally:
        await session.rollback()
        await session.close()
        await database.dispose_engine()
