"""Cache: backends and cache key utilities.

Used by the resource services for cache-aside reads and coherence after
writes. MemoryCache is the default single in-process cache; CacheService
is the Redis backend. Key format is in keys.py.
"""

from registry.infrastructure.cache.cache_protocol import CacheProtocol
from registry.infrastructure.cache.keys import (
    collection_key,
    entry_key,
    namespace_prefix,
)
from registry.infrastructure.cache.memory_cache import MemoryCache
from registry.infrastructure.cache.redis_cache import CacheService

__all__ = [
    "CacheProtocol",
    "CacheService",
    "MemoryCache",
    "collection_key",
    "entry_key",
    "namespace_prefix",
]
