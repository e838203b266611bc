"""ORM models. Import here so Alembic autogenerate sees every table."""

from registry.infrastructure.persistence.models.book import Book
from registry.infrastructure.persistence.models.player import Player

__all__ = ["Book", "Player"]
