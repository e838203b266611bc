"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from registry.api.v1.dependencies.
"""

from fastapi import APIRouter

from registry.api.v1.endpoints import books, health, players

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(books.router, prefix="/books", tags=["books"])
api_router.include_router(players.router, prefix="/players", tags=["players"])
