"""Book API schemas.

Request bodies only bind types; field rules (ISBN checksum, non-blank
fields, past dates, URL) are checked by the service so that a rejected book
gets a 400 with every violation listed.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from registry.application.dtos.book import BookDTO


class BookRequest(BaseModel):
    """Request body for POST /books and PUT /books/{isbn}."""

    isbn: str | None = Field(default=None, description="ISBN-10 or ISBN-13")
    title: str | None = None
    subtitle: str | None = None
    author: str | None = None
    publisher: str | None = None
    published: date | None = Field(default=None, description="Publication date (past)")
    pages: int | None = None
    description: str | None = Field(default=None, max_length=8192)
    website: str | None = None

    def to_dto(self, isbn: str | None = None) -> BookDTO:
        """Build the service DTO; isbn overrides the body value when given."""
        return BookDTO(
            isbn=isbn if isbn is not None else self.isbn,
            title=self.title,
            subtitle=self.subtitle,
            author=self.author,
            publisher=self.publisher,
            published=self.published,
            pages=self.pages,
            description=self.description,
            website=self.website,
        )


class BookResponse(BaseModel):
    """Book in list/get responses."""

    isbn: str
    title: str | None = None
    subtitle: str | None = None
    author: str | None = None
    publisher: str | None = None
    published: date | None = None
    pages: int | None = None
    description: str | None = None
    website: str | None = None

    model_config = ConfigDict(from_attributes=True)
