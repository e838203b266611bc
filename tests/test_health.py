"""Smoke tests for health and app wiring."""

from httpx import AsyncClient

from registry.main import app


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_ready_when_cache_available(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "cache": "ok"}


async def test_not_ready_without_cache(client: AsyncClient) -> None:
    app.state.cache = None
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 503
    assert response.json()["cache"] == "unavailable"


async def test_request_id_is_echoed(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"


async def test_request_id_is_generated(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health")
    assert response.headers.get("X-Request-ID")
