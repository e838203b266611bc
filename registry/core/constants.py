"""Core constants: cache namespaces and key structure.

Single source of truth for cache key layout. Used by the cache key builders
and the resource services.
"""

# Cache namespaces, one per resource kind
CACHE_NAMESPACE_BOOKS = "books"
CACHE_NAMESPACE_PLAYERS = "players"

# Key segments: <namespace>:id:<key> and <namespace>:all
CACHE_ENTRY_SEGMENT = "id"
CACHE_COLLECTION_SEGMENT = "all"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION_SQLSTATE = "23505"

# Invalidation generation per namespace: generation:<namespace>. Kept outside
# the namespace prefix so clearing a namespace does not reset it.
CACHE_GENERATION_SEGMENT = "generation"
