"""Book API: thin routes delegating to BookService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response

from registry.api.v1.dependencies import get_book_service
from registry.application.dtos.results import Conflict, Rejected
from registry.application.services.book_service import BookService
from registry.application.services.book_validator import normalize_isbn, validate_book
from registry.domain.exceptions import (
    ConflictException,
    ResourceNotFoundException,
    ValidationException,
)
from registry.schemas.book import BookRequest, BookResponse

router = APIRouter()

IsbnPath = Annotated[
    str,
    Path(pattern=r"^[0-9Xx -]{10,17}$", description="ISBN-10 or ISBN-13"),
]


@router.post("", response_model=BookResponse, status_code=201)
async def create_book(
    body: BookRequest,
    response: Response,
    service: Annotated[BookService, Depends(get_book_service)],
):
    """Create a book. 409 when the ISBN already exists, 400 when invalid."""
    result = await service.create(body.to_dto())
    if isinstance(result, Rejected):
        raise ValidationException("Book validation failed", errors=list(result.errors))
    if isinstance(result, Conflict):
        raise ConflictException("book", result.field, result.value)
    response.headers["Location"] = f"/api/v1/books/{result.value.isbn}"
    return BookResponse.model_validate(result.value)


@router.get("", response_model=list[BookResponse])
async def list_books(service: Annotated[BookService, Depends(get_book_service)]):
    """Return every book (cached collection)."""
    return [BookResponse.model_validate(b) for b in await service.retrieve_all()]


@router.get("/search", response_model=list[BookResponse])
async def search_books(
    service: Annotated[BookService, Depends(get_book_service)],
    description: str = Query(..., min_length=1, description="Keyword in description"),
):
    """Books whose description contains the keyword (case-insensitive, uncached)."""
    return [BookResponse.model_validate(b) for b in await service.search(description)]


@router.get("/{isbn}", response_model=BookResponse)
async def get_book(
    isbn: IsbnPath,
    service: Annotated[BookService, Depends(get_book_service)],
):
    """Get book by ISBN."""
    book = await service.retrieve_by_id(isbn)
    if book is None:
        raise ResourceNotFoundException("book", isbn)
    return BookResponse.model_validate(book)


@router.put("/{isbn}", status_code=204)
async def update_book(
    isbn: IsbnPath,
    body: BookRequest,
    service: Annotated[BookService, Depends(get_book_service)],
) -> Response:
    """Replace a book. Body ISBN, when present, must match the path (ignoring hyphens)."""
    if body.isbn is not None and normalize_isbn(body.isbn) != normalize_isbn(isbn):
        raise ValidationException("Body isbn does not match path", field="isbn")
    dto = body.to_dto(normalize_isbn(isbn))
    errors = validate_book(dto)
    if errors:
        raise ValidationException("Book validation failed", errors=errors)
    if not await service.update(dto):
        raise ResourceNotFoundException("book", isbn)
    return Response(status_code=204)


@router.delete("/{isbn}", status_code=204)
async def delete_book(
    isbn: IsbnPath,
    service: Annotated[BookService, Depends(get_book_service)],
) -> Response:
    """Delete book by ISBN."""
    if not await service.delete(isbn):
        raise ResourceNotFoundException("book", isbn)
    return Response(status_code=204)
