"""Repository and mapper interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill.
Entities are opaque to the services: they only travel between a repository
and the mapper that knows their fields.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from registry.application.dtos.results import SaveResult


class IEntityStore[K](Protocol):
    """Persistence operations shared by every resource kind."""

    async def exists(self, entity_id: K) -> bool:
        """Return True if a record with this primary key exists."""

    async def get_by_id(self, entity_id: K) -> Any | None:
        """Return the entity for this primary key, or None."""

    async def get_all(self) -> list[Any]:
        """Return every entity in store order."""

    async def search(self, term: str) -> list[Any]:
        """Return entities whose search column contains term (case-insensitive)."""

    async def create(self, obj: Any) -> SaveResult[Any]:
        """Insert a new entity; UniqueViolation when a unique constraint fails."""

    async def update(self, obj: Any) -> SaveResult[Any]:
        """Replace an existing entity; UniqueViolation when a unique constraint fails."""

    async def delete_by_id(self, entity_id: K) -> bool:
        """Delete by primary key; return True if a row was removed."""


class IBookRepository(IEntityStore[str], Protocol):
    """Books keyed by ISBN; search matches the description."""


class IPlayerRepository(IEntityStore[int], Protocol):
    """Players keyed by surrogate id; search matches the league."""

    async def get_by_squad_number(self, squad_number: int) -> Any | None:
        """Return the player wearing squad_number, or None."""


class IEntityMapper[D](Protocol):
    """Stateless DTO <-> entity converter."""

    def to_dto(self, entity: Any) -> D:
        """Map a persisted entity to its DTO."""

    def to_entity(self, dto: D) -> Any:
        """Map a DTO to a new, unattached entity."""
