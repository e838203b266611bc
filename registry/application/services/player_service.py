"""Player application service: CRUD, league and squad-number search with caching.

Squad numbers are unique. create() pre-checks the store, but the check and
the insert are not atomic: the unique index on players.squad_number is the
final arbiter, and its violation comes back from the repository as a
UniqueViolation that create() reports as Conflict.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from registry.application.dtos.player import (
    PlayerDTO,
    player_from_dict,
    player_to_dict,
)
from registry.application.dtos.results import Conflict
from registry.application.interfaces.repositories import (
    IEntityMapper,
    IPlayerRepository,
)
from registry.application.services.cached_resource_service import (
    CachedResourceService,
)
from registry.application.services.player_validator import validate_player
from registry.core.constants import CACHE_NAMESPACE_PLAYERS
from registry.domain.enums import InvalidationPolicy
from registry.infrastructure.cache.cache_protocol import CacheProtocol


class PlayerService(CachedResourceService[int, PlayerDTO]):
    """Players keyed by store-assigned id, unique by squad number."""

    resource_type = "player"

    def __init__(
        self,
        repository: IPlayerRepository,
        cache: CacheProtocol,
        mapper: IEntityMapper[PlayerDTO],
        *,
        invalidation: InvalidationPolicy = InvalidationPolicy.FULL,
        cache_collection: bool = True,
    ) -> None:
        super().__init__(
            repository,
            cache,
            mapper,
            namespace=CACHE_NAMESPACE_PLAYERS,
            invalidation=invalidation,
            cache_collection=cache_collection,
        )
        self._players = repository

    def _key_of(self, dto: PlayerDTO) -> int | None:
        return dto.id

    def _validate(self, dto: PlayerDTO) -> list[str]:
        return validate_player(dto)

    async def _find_conflict(self, dto: PlayerDTO) -> Conflict | None:
        if dto.squad_number is None:
            return None
        if await self._players.get_by_squad_number(dto.squad_number) is not None:
            return self._conflict_for(dto)
        return None

    def _conflict_for(self, dto: PlayerDTO) -> Conflict:
        return Conflict(field="squad_number", value=dto.squad_number)

    def _prepare_for_create(self, dto: PlayerDTO) -> PlayerDTO:
        return dataclasses.replace(dto, id=None)

    def _serialize(self, dto: PlayerDTO) -> dict[str, Any]:
        return player_to_dict(dto)

    def _deserialize(self, data: dict[str, Any]) -> PlayerDTO:
        return player_from_dict(data)

    async def search_by_squad_number(self, squad_number: int) -> PlayerDTO | None:
        """Exact match on squad number (uncached)."""
        player = await self._players.get_by_squad_number(squad_number)
        return self._mapper.to_dto(player) if player is not None else None
