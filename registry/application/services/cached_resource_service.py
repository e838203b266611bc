"""Cache-aside resource service shared by books and players.

Every mutation runs VALIDATE -> CHECK_EXISTENCE/CONFLICT -> PERSIST ->
RECONCILE_CACHE -> RETURN. A failure before PERSIST short-circuits without
store writes; a unique violation reported by PERSIST short-circuits before
the cache is touched. Store and cache are not in one transaction, so a
concurrent reader may see the pre-mutation entry until RECONCILE_CACHE
completes.

Cache layout per namespace: one entry per primary key plus one collection
entry holding the full list. Negative lookups are never cached and search
results never touch the cache.

Every reconciliation advances the namespace generation before touching
entries. A read that misses records the generation first and fills the cache
only if it is unchanged after the store load, so a list or record loaded
before a concurrent mutation is never written back over its eviction.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from registry.application.dtos.results import (
    Conflict,
    Created,
    CreateResult,
    Rejected,
    UniqueViolation,
)
from registry.application.interfaces.repositories import IEntityMapper, IEntityStore
from registry.domain.enums import InvalidationPolicy
from registry.infrastructure.cache.cache_protocol import CacheProtocol
from registry.infrastructure.cache.keys import collection_key, entry_key

logger = logging.getLogger(__name__)


class CachedResourceService[K, D](ABC):
    """CRUD and search over one resource kind with a coherent cache.

    Subclasses provide the primary key accessor, validation, conflict
    pre-check and cache codec. The invalidation policy decides how the cache
    is reconciled after update and delete:

    - FULL clears the whole namespace (single entries and collection entry).
    - POINT rewrites or evicts only the mutated key's entry. It would leave a
      cached collection stale, so it is only accepted with cache_collection
      disabled.
    """

    resource_type: str = "resource"

    def __init__(
        self,
        repository: IEntityStore[K],
        cache: CacheProtocol,
        mapper: IEntityMapper[D],
        *,
        namespace: str,
        invalidation: InvalidationPolicy = InvalidationPolicy.FULL,
        cache_collection: bool = True,
    ) -> None:
        if invalidation is InvalidationPolicy.POINT and cache_collection:
            raise ValueError(
                "Point invalidation leaves the cached collection stale; "
                "use InvalidationPolicy.FULL or disable cache_collection"
            )
        self._repository = repository
        self._cache = cache
        self._mapper = mapper
        self._namespace = namespace
        self._invalidation = invalidation
        self._cache_collection = cache_collection

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def invalidation(self) -> InvalidationPolicy:
        return self._invalidation

    # ---- Hooks ----

    @abstractmethod
    def _key_of(self, dto: D) -> K | None:
        """Primary key carried by dto (None when absent)."""

    @abstractmethod
    def _validate(self, dto: D) -> list[str]:
        """Field-level rule violations for dto."""

    @abstractmethod
    async def _find_conflict(self, dto: D) -> Conflict | None:
        """Pre-check uniqueness before create; None when no conflict is known."""

    @abstractmethod
    def _conflict_for(self, dto: D) -> Conflict:
        """Conflict to report when the store rejects a create as non-unique."""

    @abstractmethod
    def _serialize(self, dto: D) -> dict[str, Any]:
        """JSON-compatible form of dto for the cache."""

    @abstractmethod
    def _deserialize(self, data: dict[str, Any]) -> D:
        """Inverse of _serialize."""

    def _normalize_key(self, key: K) -> K:
        """Canonical form of a caller-supplied primary key."""
        return key

    def _canonicalize(self, dto: D) -> D:
        """dto with its primary key in canonical form (create and update)."""
        return dto

    def _prepare_for_create(self, dto: D) -> D:
        """Adjust dto before mapping on create (e.g. drop caller-supplied ids)."""
        return dto

    # ---- Create ----

    async def create(self, dto: D) -> CreateResult[D]:
        """Validate, check uniqueness, persist, then reconcile the cache.

        Returns:
            Created with the persisted DTO (including store-assigned keys),
            Conflict when a uniqueness constraint is hit (pre-check or store),
            Rejected when validation fails.
        """
        dto = self._canonicalize(dto)
        errors = self._validate(dto)
        if errors:
            logger.debug("Rejected %s create: %s", self.resource_type, errors)
            return Rejected(tuple(errors))

        conflict = await self._find_conflict(dto)
        if conflict is not None:
            logger.info(
                "Conflict creating %s: %s=%r already exists",
                self.resource_type,
                conflict.field,
                conflict.value,
            )
            return conflict

        entity = self._mapper.to_entity(self._prepare_for_create(dto))
        result = await self._repository.create(entity)
        if isinstance(result, UniqueViolation):
            # A concurrent writer won between the pre-check and this write.
            conflict = self._conflict_for(dto)
            logger.warning(
                "Store rejected %s create on %s (%s=%r)",
                self.resource_type,
                result.constraint or "unique constraint",
                conflict.field,
                conflict.value,
            )
            return conflict

        created = self._mapper.to_dto(result.entity)
        await self._reconcile_after_create(created)
        return Created(created)

    # ---- Retrieve ----

    async def retrieve_by_id(self, key: K) -> D | None:
        """Return the record for key, from cache when present.

        A miss that the store cannot satisfy returns None and caches nothing,
        so a record created moments later is visible on the next read.
        """
        key = self._normalize_key(key)
        cache_key = entry_key(self._namespace, key)
        cached = await self._cache.get(cache_key)
        if cached is not None:
            return self._deserialize(cached)
        generation = await self._cache.generation(self._namespace)
        entity = await self._repository.get_by_id(key)
        if entity is None:
            return None
        dto = self._mapper.to_dto(entity)
        await self._cache.set_if_generation(
            cache_key, self._serialize(dto), self._namespace, generation
        )
        return dto

    async def retrieve_all(self) -> list[D]:
        """Return every record in store order, from the collection entry when cached."""
        cache_key = collection_key(self._namespace)
        if self._cache_collection:
            cached = await self._cache.get(cache_key)
            if cached is not None:
                return [self._deserialize(item) for item in cached]
        generation = await self._cache.generation(self._namespace)
        dtos = [self._mapper.to_dto(e) for e in await self._repository.get_all()]
        if self._cache_collection:
            await self._cache.set_if_generation(
                cache_key, [self._serialize(d) for d in dtos], self._namespace, generation
            )
        return dtos

    async def search(self, term: str) -> list[D]:
        """Case-insensitive substring search; bypasses the cache in both directions."""
        return [self._mapper.to_dto(e) for e in await self._repository.search(term)]

    # ---- Update ----

    async def update(self, dto: D) -> bool:
        """Fully replace an existing record.

        Returns:
            True after the store write succeeded and the cache was reconciled;
            False when the key is missing, validation fails, the record does
            not exist, or the store reports a unique violation.
        """
        dto = self._canonicalize(dto)
        key = self._key_of(dto)
        if key is None or self._validate(dto):
            logger.debug("Rejected %s update for key %r", self.resource_type, key)
            return False
        if not await self._repository.exists(key):
            return False
        result = await self._repository.update(self._mapper.to_entity(dto))
        if isinstance(result, UniqueViolation):
            logger.warning(
                "Store rejected %s update for key %r on %s",
                self.resource_type,
                key,
                result.constraint or "unique constraint",
            )
            return False
        await self._reconcile_after_update(key, self._mapper.to_dto(result.entity))
        return True

    # ---- Delete ----

    async def delete(self, key: K) -> bool:
        """Delete the record for key; False (and no side effects) when absent."""
        key = self._normalize_key(key)
        if not await self._repository.exists(key):
            return False
        if not await self._repository.delete_by_id(key):
            return False
        await self._reconcile_after_delete(key)
        return True

    # ---- Cache reconciliation ----

    async def _reconcile_after_create(self, created: D) -> None:
        await self._cache.bump_generation(self._namespace)
        if self._invalidation is InvalidationPolicy.FULL:
            await self._cache.clear_namespace(self._namespace)
        key = self._key_of(created)
        if key is not None:
            await self._cache.set(entry_key(self._namespace, key), self._serialize(created))

    async def _reconcile_after_update(self, key: K, updated: D) -> None:
        await self._cache.bump_generation(self._namespace)
        if self._invalidation is InvalidationPolicy.FULL:
            await self._cache.clear_namespace(self._namespace)
        else:
            await self._cache.set(entry_key(self._namespace, key), self._serialize(updated))

    async def _reconcile_after_delete(self, key: K) -> None:
        await self._cache.bump_generation(self._namespace)
        if self._invalidation is InvalidationPolicy.FULL:
            await self._cache.clear_namespace(self._namespace)
        else:
            await self._cache.delete(entry_key(self._namespace, key))
