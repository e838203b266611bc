"""Presentation-layer dependency injection (composition root).

Builds repositories and resource services per request from the request's
database session and the application-scoped cache (app.state.cache, set by
the lifespan). Routes depend only on these dependencies.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from registry.application.services.book_service import BookService
from registry.application.services.player_service import PlayerService
from registry.domain.exceptions import CacheUnavailableException
from registry.infrastructure.cache.cache_protocol import CacheProtocol
from registry.infrastructure.persistence.database import get_db
from registry.infrastructure.persistence.mappers import BookMapper, PlayerMapper
from registry.infrastructure.persistence.repositories import (
    BookRepository,
    PlayerRepository,
)


def get_cache(request: Request) -> CacheProtocol:
    """Application-scoped cache created at startup."""
    cache = getattr(request.app.state, "cache", None)
    if cache is None:
        raise CacheUnavailableException("resolve")
    return cache


async def get_book_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    cache: Annotated[CacheProtocol, Depends(get_cache)],
) -> BookService:
    """Book service bound to the request session and the shared cache."""
    return BookService(BookRepository(db), cache, BookMapper())


async def get_player_service(
    db: Annotated[AsyncSession, Depends(get_db)],
    cache: Annotated[CacheProtocol, Depends(get_cache)],
) -> PlayerService:
    """Player service bound to the request session and the shared cache."""
    return PlayerService(PlayerRepository(db), cache, PlayerMapper())
