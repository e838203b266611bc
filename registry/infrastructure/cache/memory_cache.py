"""In-process cache backend.

The default cache: one instance per application (or per test), injected
into the services. Values are stored JSON-encoded so every read returns a
fresh copy and callers can never mutate a cached entry in place.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from registry.infrastructure.cache.keys import namespace_prefix

logger = logging.getLogger(__name__)


class MemoryCache:
    """Dict-backed cache with the same contract as the Redis CacheService.

    TTL arguments are accepted for interface compatibility and ignored:
    entries live until evicted or overwritten. Generations survive
    disconnect so a fill started before it can never land afterwards.
    """

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}
        self._generations: dict[str, int] = {}

    def is_available(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    async def connect(self) -> None:
        """No-op; kept so lifespan code can treat backends alike."""

    async def disconnect(self) -> None:
        """Drop all entries."""
        self._entries.clear()

    async def get(self, key: str) -> Any | None:
        raw = self._entries.get(key)
        if raw is None:
            logger.debug("Cache MISS: %s", key)
            return None
        logger.debug("Cache HIT: %s", key)
        return json.loads(raw)

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        self._entries[key] = json.dumps(value)
        logger.debug("Cache SET: %s", key)

    async def delete(self, key: str) -> None:
        if self._entries.pop(key, None) is not None:
            logger.debug("Cache DELETE: %s", key)

    async def clear_namespace(self, namespace: str) -> int:
        prefix = namespace_prefix(namespace)
        doomed = [k for k in self._entries if k.startswith(prefix)]
        for key in doomed:
            del self._entries[key]
        if doomed:
            logger.debug("Cache INVALIDATE: %s* (%s keys)", prefix, len(doomed))
        return len(doomed)

    async def generation(self, namespace: str) -> int:
        return self._generations.get(namespace, 0)

    async def bump_generation(self, namespace: str) -> int:
        self._generations[namespace] = self._generations.get(namespace, 0) + 1
        return self._generations[namespace]

    async def set_if_generation(
        self, key: str, value: Any, namespace: str, generation: int
    ) -> bool:
        # No await between the check and the write, so no mutation can interleave.
        if self._generations.get(namespace, 0) != generation:
            logger.debug("Cache SKIP stale fill: %s", key)
            return False
        self._entries[key] = json.dumps(value)
        logger.debug("Cache SET: %s", key)
        return True

