"""Book application service: CRUD and description search with caching."""

from __future__ import annotations

import dataclasses
from typing import Any

from registry.application.dtos.book import BookDTO, book_from_dict, book_to_dict
from registry.application.dtos.results import Conflict
from registry.application.interfaces.repositories import IBookRepository, IEntityMapper
from registry.application.services.book_validator import normalize_isbn, validate_book
from registry.application.services.cached_resource_service import (
    CachedResourceService,
)
from registry.core.constants import CACHE_NAMESPACE_BOOKS
from registry.domain.enums import InvalidationPolicy
from registry.infrastructure.cache.cache_protocol import CacheProtocol


class BookService(CachedResourceService[str, BookDTO]):
    """Books keyed by ISBN. The only uniqueness constraint is the primary key.

    ISBNs are stored and looked up without hyphens or spaces, so
    "978-1-4842-0077-3" and "9781484200773" name the same book.
    """

    resource_type = "book"

    def __init__(
        self,
        repository: IBookRepository,
        cache: CacheProtocol,
        mapper: IEntityMapper[BookDTO],
        *,
        invalidation: InvalidationPolicy = InvalidationPolicy.FULL,
        cache_collection: bool = True,
    ) -> None:
        super().__init__(
            repository,
            cache,
            mapper,
            namespace=CACHE_NAMESPACE_BOOKS,
            invalidation=invalidation,
            cache_collection=cache_collection,
        )

    def _key_of(self, dto: BookDTO) -> str | None:
        return dto.isbn

    def _normalize_key(self, key: str) -> str:
        return normalize_isbn(key)

    def _canonicalize(self, dto: BookDTO) -> BookDTO:
        if dto.isbn is None:
            return dto
        return dataclasses.replace(dto, isbn=normalize_isbn(dto.isbn))

    def _validate(self, dto: BookDTO) -> list[str]:
        return validate_book(dto)

    async def _find_conflict(self, dto: BookDTO) -> Conflict | None:
        if dto.isbn is not None and await self._repository.exists(dto.isbn):
            return self._conflict_for(dto)
        return None

    def _conflict_for(self, dto: BookDTO) -> Conflict:
        return Conflict(field="isbn", value=dto.isbn)

    def _serialize(self, dto: BookDTO) -> dict[str, Any]:
        return book_to_dict(dto)

    def _deserialize(self, data: dict[str, Any]) -> BookDTO:
        return book_from_dict(data)
