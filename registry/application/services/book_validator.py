"""Field-level validation for books.

Returns the list of violated rules instead of raising, so the service can
reject a record before touching the store or the cache.
"""

from datetime import date

from pydantic import HttpUrl, TypeAdapter, ValidationError

from registry.application.dtos.book import BookDTO

_URL_ADAPTER = TypeAdapter(HttpUrl)

# Characters allowed between ISBN digits and ignored by the checksum.
_ISBN_SEPARATORS = str.maketrans("", "", "- ")


def normalize_isbn(isbn: str) -> str:
    """Strip hyphens and spaces, uppercase a trailing X."""
    return isbn.translate(_ISBN_SEPARATORS).upper()


def is_valid_isbn(isbn: str | None) -> bool:
    """Return True for a well-formed ISBN-10 or ISBN-13 with a valid check digit."""
    if not isbn:
        return False
    digits = normalize_isbn(isbn)
    if len(digits) == 13 and digits.isdigit():
        total = sum(int(d) * (3 if i % 2 else 1) for i, d in enumerate(digits))
        return total % 10 == 0
    if len(digits) == 10 and digits[:9].isdigit() and (digits[9].isdigit() or digits[9] == "X"):
        values = [int(d) for d in digits[:9]] + [10 if digits[9] == "X" else int(digits[9])]
        total = sum(v * (10 - i) for i, v in enumerate(values))
        return total % 11 == 0
    return False


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_book(dto: BookDTO, today: date | None = None) -> list[str]:
    """Return violated rules for dto; an empty list means valid.

    Rules: isbn is a valid ISBN-10/13; title, author and description are not
    blank; published is in the past; pages is not negative; website is an
    http(s) URL when given.
    """
    today = today or date.today()
    errors: list[str] = []
    if _is_blank(dto.isbn):
        errors.append("isbn must not be blank")
    elif not is_valid_isbn(dto.isbn):
        errors.append("isbn must be a valid ISBN-10 or ISBN-13")
    for field in ("title", "author", "description"):
        if _is_blank(getattr(dto, field)):
            errors.append(f"{field} must not be blank")
    if dto.published is not None and dto.published >= today:
        errors.append("published must be a date in the past")
    if dto.pages is not None and dto.pages < 0:
        errors.append("pages must not be negative")
    if dto.website:
        try:
            _URL_ADAPTER.validate_python(dto.website)
        except ValidationError:
            errors.append("website must be a valid URL")
    return errors
