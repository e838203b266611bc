"""DTOs for book use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import date
from typing import Any


@dataclass(frozen=True)
class BookDTO:
    """Book record at the service boundary. Keyed by ISBN.

    Every field is optional at the type level; validate_book decides what a
    caller may persist.
    """

    isbn: str | None = None
    title: str | None = None
    subtitle: str | None = None
    author: str | None = None
    publisher: str | None = None
    published: date | None = None
    pages: int | None = None
    description: str | None = None
    website: str | None = None


def book_to_dict(dto: BookDTO) -> dict[str, Any]:
    """JSON-compatible dict for caching and responses (ISO dates)."""
    return {
        "isbn": dto.isbn,
        "title": dto.title,
        "subtitle": dto.subtitle,
        "author": dto.author,
        "publisher": dto.publisher,
        "published": dto.published.isoformat() if dto.published else None,
        "pages": dto.pages,
        "description": dto.description,
        "website": dto.website,
    }


def book_from_dict(data: dict[str, Any]) -> BookDTO:
    """Build a BookDTO from book_to_dict output."""
    published = data.get("published")
    return BookDTO(
        isbn=data.get("isbn"),
        title=data.get("title"),
        subtitle=data.get("subtitle"),
        author=data.get("author"),
        publisher=data.get("publisher"),
        published=date.fromisoformat(published) if published else None,
        pages=data.get("pages"),
        description=data.get("description"),
        website=data.get("website"),
    )
