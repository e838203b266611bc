"""Application DTOs and result values (no ORM dependency)."""

from registry.application.dtos.book import BookDTO, book_from_dict, book_to_dict
from registry.application.dtos.player import (
    PlayerDTO,
    player_from_dict,
    player_to_dict,
)
from registry.application.dtos.results import (
    Conflict,
    Created,
    CreateResult,
    Rejected,
    Saved,
    SaveResult,
    UniqueViolation,
)

__all__ = [
    "BookDTO",
    "Conflict",
    "Created",
    "CreateResult",
    "PlayerDTO",
    "Rejected",
    "SaveResult",
    "Saved",
    "UniqueViolation",
    "book_from_dict",
    "book_to_dict",
    "player_from_dict",
    "player_to_dict",
]
