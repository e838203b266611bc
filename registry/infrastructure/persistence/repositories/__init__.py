"""SQLAlchemy repositories implementing the application store interfaces."""

from registry.infrastructure.persistence.repositories.base import BaseRepository
from registry.infrastructure.persistence.repositories.book_repo import BookRepository
from registry.infrastructure.persistence.repositories.player_repo import (
    PlayerRepository,
)

__all__ = ["BaseRepository", "BookRepository", "PlayerRepository"]
