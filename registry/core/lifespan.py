"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: the cache backend (one instance
shared by every request), the SQL engine and the tracer provider.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from registry.core.config import get_settings
from registry.domain.enums import CacheBackend
from registry.infrastructure.cache.cache_protocol import CacheProtocol
from registry.shared.telemetry import get_telemetry, set_telemetry

logger = logging.getLogger(__name__)


def build_cache() -> CacheProtocol:
    """Create the configured cache backend (not yet connected)."""
    settings = get_settings()
    if settings.cache_backend == CacheBackend.REDIS.value:
        from registry.infrastructure.cache.redis_cache import CacheService

        return CacheService(default_ttl=settings.cache_ttl or None)
    from registry.infrastructure.cache.memory_cache import MemoryCache

    return MemoryCache()


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    A cache already placed on app.state (e.g. by tests) is kept as is.
    Shutdown order: cache disconnect, telemetry shutdown, SQL engine dispose.
    Tracing itself is set up by create_app(), before the middleware stack is
    built.
    """
    if getattr(app.state, "cache", None) is None:
        cache = build_cache()
        await cache.connect()
        app.state.cache = cache
        logger.info("Cache backend ready: %s", type(cache).__name__)

    yield

    cache = getattr(app.state, "cache", None)
    if cache is not None:
        await cache.disconnect()
        app.state.cache = None
        logger.info("Cache disconnected")

    telemetry = get_telemetry()
    if telemetry is not None:
        telemetry.shutdown()
        set_telemetry(None)
        logger.info("Telemetry shut down")

    from registry.infrastructure.persistence import database

    await database.dispose_engine()
