"""Application services: cached resource services and field validators."""

from registry.application.services.book_service import BookService
from registry.application.services.book_validator import (
    is_valid_isbn,
    normalize_isbn,
    validate_book,
)
from registry.application.services.cached_resource_service import (
    CachedResourceService,
)
from registry.application.services.player_service import PlayerService
from registry.application.services.player_validator import validate_player

__all__ = [
    "BookService",
    "CachedResourceService",
    "PlayerService",
    "is_valid_isbn",
    "normalize_isbn",
    "validate_book",
    "validate_player",
]
