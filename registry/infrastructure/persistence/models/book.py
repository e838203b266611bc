"""Book ORM model. Primary key is the ISBN supplied by the caller."""

from datetime import date

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from registry.infrastructure.persistence.database import Base

DESCRIPTION_MAX_LENGTH = 8192


class Book(Base):
    """Bibliographic record. Table: books."""

    __tablename__ = "books"

    isbn: Mapped[str] = mapped_column(String(17), primary_key=True)
    title: Mapped[str | None] = mapped_column(String, nullable=True)
    subtitle: Mapped[str | None] = mapped_column(String, nullable=True)
    author: Mapped[str | None] = mapped_column(String, nullable=True)
    publisher: Mapped[str | None] = mapped_column(String, nullable=True)
    published: Mapped[date | None] = mapped_column(Date, nullable=True)
    pages: Mapped[int | None] = mapped_column(Integer, nullable=True)
    description: Mapped[str | None] = mapped_column(
        String(DESCRIPTION_MAX_LENGTH), nullable=True
    )
    website: Mapped[str | None] = mapped_column(String, nullable=True)
