"""Health check endpoints for liveness and readiness checks."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from registry.schemas.health import HealthResponse, ReadinessResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Cache backend not connected", "model": ReadinessResponse}},
)
def readiness_check(request: Request) -> ReadinessResponse | JSONResponse:
    """Return 200 when the cache backend is usable, else 503."""
    cache = getattr(request.app.state, "cache", None)
    if cache is None or not cache.is_available():
        body = ReadinessResponse(status="not_ready", cache="unavailable")
        return JSONResponse(status_code=503, content=body.model_dump())
    return ReadinessResponse()
