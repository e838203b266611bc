"""Cache protocol consumed by the resource services."""

from typing import Any, Protocol


class CacheProtocol(Protocol):
    """Protocol for cache backends (in-memory or Redis).

    Values are JSON-compatible (dicts, lists, str, int, bool, None). Entries
    have no TTL unless the backend is configured with one; they live until
    evicted or overwritten. Backend failures raise CacheUnavailableException.
    """

    async def connect(self) -> None:
        """Prepare the backend (app startup)."""
        ...

    async def disconnect(self) -> None:
        """Release the backend (app shutdown)."""
        ...

    def is_available(self) -> bool:
        """Return True if the cache is connected and usable."""
        ...

    async def get(self, key: str) -> Any:
        """Return cached value or None."""
        ...

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """Store value, optionally with a TTL in seconds."""
        ...

    async def delete(self, key: str) -> None:
        """Remove key from cache."""
        ...

    async def clear_namespace(self, namespace: str) -> int:
        """Remove every key in namespace; return number of keys removed."""
        ...

    async def generation(self, namespace: str) -> int:
        """Current invalidation generation of namespace (0 before any bump)."""
        ...

    async def bump_generation(self, namespace: str) -> int:
        """Advance the invalidation generation of namespace; return the new value."""
        ...

    async def set_if_generation(
        self, key: str, value: Any, namespace: str, generation: int
    ) -> bool:
        """Store value only while namespace is still at generation.

        Used to fill the cache after a store read: if a mutation reconciled
        the namespace in between, the read may be stale and is not cached.
        Returns True if the value was stored.
        """
        ...
