"""Domain enumerations for the registry service."""

from enum import Enum


class InvalidationPolicy(str, Enum):
    """How a resource service restores cache coherence after a mutation.

    POINT overwrites or evicts only the single entry for the mutated key.
    FULL evicts every entry in the resource's namespace, including the
    collection entry. FULL is required whenever the collection is cached.
    """

    POINT = "point"
    FULL = "full"


class CacheBackend(str, Enum):
    """Cache implementation selected by configuration."""

    MEMORY = "memory"
    REDIS = "redis"

    @classmethod
    def values(cls) -> list[str]:
        """Return all backend values as strings."""
        return [backend.value for backend in cls]
