"""Book repository (SQLAlchemy). Returns ORM entities; the service maps them."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from registry.infrastructure.persistence.models.book import Book
from registry.infrastructure.persistence.repositories.base import BaseRepository


class BookRepository(BaseRepository[Book]):
    """Books keyed by ISBN."""

    def __init__(self, db: AsyncSession, *, commit: bool = True) -> None:
        super().__init__(db, Book, commit=commit)

    async def search(self, term: str) -> list[Book]:
        """Books whose description contains term, case-insensitive."""
        result = await self.db.execute(
            select(Book)
            .where(Book.description.icontains(term, autoescape=True))
            .order_by(Book.isbn)
        )
        return list(result.scalars().all())
