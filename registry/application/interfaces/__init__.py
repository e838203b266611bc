"""Application interfaces (ports) implemented by infrastructure."""

from registry.application.interfaces.repositories import (
    IBookRepository,
    IEntityMapper,
    IEntityStore,
    IPlayerRepository,
)

__all__ = [
    "IBookRepository",
    "IEntityMapper",
    "IEntityStore",
    "IPlayerRepository",
]
