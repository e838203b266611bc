"""Redis-based cache backend.

Provides async Redis caching with the same contract as MemoryCache. Key
format comes from registry.infrastructure.cache.keys. Failures are not
swallowed: after one reconnect attempt a failed operation raises
CacheUnavailableException.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import redis.asyncio as redis

from registry.core.config import get_settings
from registry.domain.exceptions import CacheUnavailableException
from registry.infrastructure.cache.keys import generation_key, namespace_prefix

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Keys per UNLINK round-trip when clearing a namespace.
_UNLINK_CHUNK_SIZE = 500

# KEYS[1]=generation key, KEYS[2]=entry key; ARGV=expected generation, value, ttl.
_SET_IF_GENERATION = """
if (redis.call("GET", KEYS[1]) or "0") ~= ARGV[1] then
    return 0
end
if ARGV[3] == "" then
    redis.call("SET", KEYS[2], ARGV[2])
else
    redis.call("SET", KEYS[2], ARGV[2], "EX", ARGV[3])
end
return 1
"""


class CacheService:
    """Async Redis cache service.

    Uses registry.core.config for connection settings. Call connect() at
    startup and disconnect() at shutdown.
    """

    def __init__(
        self, redis_client: redis.Redis | None = None, default_ttl: int | None = None
    ) -> None:
        """Initialize cache service.

        Args:
            redis_client: Optional Redis client for testing or DI.
            default_ttl: TTL in seconds applied when set() gets none; None or 0
                means no expiry.
        """
        self.redis = redis_client
        self.settings = get_settings()
        self.default_ttl = default_ttl
        self._connected = redis_client is not None

    async def connect(self) -> None:
        """Establish Redis connection. Call on app startup."""
        if self.redis is not None:
            return
        client = redis.Redis(
            host=self.settings.redis_host,
            port=self.settings.redis_port,
            db=self.settings.redis_db,
            password=self.settings.redis_password.get_secret_value()
            if self.settings.redis_password
            else None,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_keepalive=True,
        )
        try:
            await client.ping()
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning("Redis connection failed: %s", e)
            await client.aclose()
            self._connected = False
            return
        self.redis = client
        self._connected = True
        logger.info(
            "Redis cache connected: %s:%s",
            self.settings.redis_host,
            self.settings.redis_port,
        )

    async def disconnect(self) -> None:
        """Close Redis connection. Call on app shutdown."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            self._connected = False
            logger.info("Redis cache disconnected")

    async def _reconnect(self) -> bool:
        """Drop the current client and connect again. Returns True if reconnected."""
        if self.redis is not None:
            try:
                await self.redis.aclose()
            except redis.RedisError:
                logger.debug("Ignoring error while closing stale Redis client")
        self.redis = None
        self._connected = False
        await self.connect()
        return self._connected

    def is_available(self) -> bool:
        """Return True if Redis is connected and usable."""
        return self._connected and self.redis is not None

    async def _run(
        self,
        operation: str,
        key: str,
        call: Callable[[redis.Redis], Awaitable[T]],
    ) -> T:
        """Run call against the client, reconnecting once on connection loss.

        Raises:
            CacheUnavailableException: If Redis is unreachable or errors.
        """
        if not self.is_available() and not await self._reconnect():
            raise CacheUnavailableException(operation, key)
        assert self.redis is not None
        try:
            return await call(self.redis)
        except (redis.ConnectionError, redis.TimeoutError):
            logger.warning("Cache %s lost connection for %s; reconnecting", operation, key)
            if await self._reconnect():
                assert self.redis is not None
                try:
                    return await call(self.redis)
                except redis.RedisError as e:
                    raise CacheUnavailableException(operation, key) from e
            raise CacheUnavailableException(operation, key)
        except redis.RedisError as e:
            logger.exception("Cache %s error for key %s", operation, key)
            raise CacheUnavailableException(operation, key) from e

    async def get(self, key: str) -> Any | None:
        """Return cached value (JSON-deserialized) or None if missing.

        Args:
            key: Cache key (use registry.infrastructure.cache.keys builders).

        Returns:
            Cached value or None.
        """
        value = await self._run("get", key, lambda r: r.get(key))
        if value is None:
            logger.debug("Cache MISS: %s", key)
            return None
        logger.debug("Cache HIT: %s", key)
        return json.loads(value)

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """Store value, with TTL when given (or configured as default).

        Args:
            key: Cache key.
            value: Value to cache (JSON-serializable).
            ttl: Time-to-live in seconds; None falls back to default_ttl.
        """
        serialized = json.dumps(value)
        expiry = ttl if ttl is not None else self.default_ttl
        await self._run("set", key, lambda r: r.set(key, serialized, ex=expiry or None))
        logger.debug("Cache SET: %s (TTL: %s)", key, expiry or "none")

    async def delete(self, key: str) -> None:
        """Remove key from cache.

        Args:
            key: Cache key to delete.
        """
        await self._run("delete", key, lambda r: r.delete(key))
        logger.debug("Cache DELETE: %s", key)

    async def delete_pattern(self, pattern: str) -> int:
        """Delete all keys matching pattern using SCAN + batched UNLINK (non-blocking).

        Uses scan_iter to avoid KEYS blocking; collects keys in chunks and
        UNLINKs each chunk to minimize round-trips.

        Args:
            pattern: Redis SCAN match pattern (e.g. players:*).

        Returns:
            Number of keys deleted.
        """

        async def _unlink_matching(client: redis.Redis) -> int:
            deleted = 0
            chunk: list[str] = []
            async for key in client.scan_iter(match=pattern):
                chunk.append(key)
                if len(chunk) >= _UNLINK_CHUNK_SIZE:
                    deleted += await _unlink(client, chunk)
                    chunk = []
            if chunk:
                deleted += await _unlink(client, chunk)
            return deleted

        deleted = await self._run("delete_pattern", pattern, _unlink_matching)
        if deleted > 0:
            logger.debug("Cache INVALIDATE: %s (%s keys)", pattern, deleted)
        return deleted

    async def clear_namespace(self, namespace: str) -> int:
        """Remove every key in namespace (single entries and collection entry)."""
        return await self.delete_pattern(f"{namespace_prefix(namespace)}*")

    async def generation(self, namespace: str) -> int:
        """Current invalidation generation of namespace (0 before any bump)."""
        key = generation_key(namespace)
        value = await self._run("generation", key, lambda r: r.get(key))
        return int(value) if value is not None else 0

    async def bump_generation(self, namespace: str) -> int:
        """INCR the namespace generation; shared by every process on this Redis."""
        key = generation_key(namespace)
        return int(await self._run("bump_generation", key, lambda r: r.incr(key)))

    async def set_if_generation(
        self, key: str, value: Any, namespace: str, generation: int
    ) -> bool:
        """Atomically store value only while namespace is still at generation.

        The check and the SET run in one Lua script, so a bump from another
        process cannot slip in between.
        """
        serialized = json.dumps(value)
        expiry = self.default_ttl or ""
        stored = await self._run(
            "set_if_generation",
            key,
            lambda r: r.eval(
                _SET_IF_GENERATION,
                2,
                generation_key(namespace),
                key,
                str(generation),
                serialized,
                str(expiry),
            ),
        )
        if stored:
            logger.debug("Cache SET: %s (TTL: %s)", key, expiry or "none")
        else:
            logger.debug("Cache SKIP stale fill: %s", key)
        return bool(stored)


async def _unlink(client: redis.Redis, keys: list[str]) -> int:
    async with client.pipeline(transaction=False) as pipe:
        pipe.unlink(*keys)
        results = await pipe.execute()
    return sum(int(r or 0) for r in results)
