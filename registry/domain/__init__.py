"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from registry.domain.enums import CacheBackend, InvalidationPolicy
from registry.domain.exceptions import (
    CacheUnavailableException,
    ConflictException,
    RegistryException,
    ResourceNotFoundException,
    ValidationException,
)

__all__ = [
    # Enums
    "CacheBackend",
    "InvalidationPolicy",
    # Exceptions
    "CacheUnavailableException",
    "ConflictException",
    "RegistryException",
    "ResourceNotFoundException",
    "ValidationException",
]
