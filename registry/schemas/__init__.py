"""API request/response schemas (pydantic)."""

from registry.schemas.book import BookRequest, BookResponse
from registry.schemas.health import HealthResponse, ReadinessResponse
from registry.schemas.player import PlayerRequest, PlayerResponse

__all__ = [
    "BookRequest",
    "BookResponse",
    "HealthResponse",
    "PlayerRequest",
    "PlayerResponse",
    "ReadinessResponse",
]
