"""Cache key builders. Single place for key format.

Keys are <namespace>:id:<key> for single records, <namespace>:all for the
collection entry and generation:<namespace> for the invalidation counter.
Key components must not contain CACHE_KEY_SEP to avoid ambiguous or
colliding keys.
"""

from registry.core.constants import (
    CACHE_COLLECTION_SEGMENT,
    CACHE_ENTRY_SEGMENT,
    CACHE_GENERATION_SEGMENT,
    CACHE_KEY_SEP,
)


def _validate_key_component(value: str, name: str) -> None:
    """Raise ValueError if value is empty or contains the cache key separator.

    Args:
        value: String component used in a cache key.
        name: Name of the component (for error message).

    Raises:
        ValueError: If value is empty or contains CACHE_KEY_SEP.
    """
    if not value:
        raise ValueError(f"Cache key component {name!r} must not be empty")
    if CACHE_KEY_SEP in value:
        raise ValueError(
            f"Cache key component {name!r} must not contain separator {CACHE_KEY_SEP!r}"
        )


def namespace_prefix(namespace: str) -> str:
    """Prefix shared by every key in namespace (used for namespace eviction)."""
    _validate_key_component(namespace, "namespace")
    return f"{namespace}{CACHE_KEY_SEP}"


def entry_key(namespace: str, key: str | int) -> str:
    """Cache key for a single record by primary key."""
    component = str(key)
    _validate_key_component(component, "key")
    return f"{namespace_prefix(namespace)}{CACHE_ENTRY_SEGMENT}{CACHE_KEY_SEP}{component}"


def collection_key(namespace: str) -> str:
    """Cache key for the full record list of a namespace."""
    return f"{namespace_prefix(namespace)}{CACHE_COLLECTION_SEGMENT}"


def generation_key(namespace: str) -> str:
    """Cache key for the invalidation generation counter of a namespace."""
    _validate_key_component(namespace, "namespace")
    return f"{CACHE_GENERATION_SEGMENT}{CACHE_KEY_SEP}{namespace}"
