"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Every error response has the
same JSON shape: {"error": <code>, "message": <text>, "details": <any>}.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from registry.core.config import get_settings
from registry.domain.exceptions import RegistryException

logger = logging.getLogger(__name__)

# Domain error_code -> HTTP status; unknown codes are client errors.
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "RESOURCE_NOT_FOUND": 404,
    "CONFLICT": 409,
    "CACHE_UNAVAILABLE": 503,
}


def status_for_error_code(error_code: str) -> int:
    """HTTP status for a domain error code (400 when unmapped)."""
    return _ERROR_CODE_STATUS.get(error_code, 400)


def _error_response(
    status_code: int, error: str, message: Any, details: Any = None
) -> JSONResponse:
    content: dict[str, Any] = {"error": error, "message": message}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def _registry_exception_handler(
    request: Request, exc: RegistryException
) -> JSONResponse:
    """Map RegistryException.to_dict() to its status; 5xx are logged as errors."""
    status = status_for_error_code(exc.error_code)
    if status >= 500:
        logger.error(
            "%s %s failed: %s %s",
            request.method,
            request.url.path,
            exc.error_code,
            exc.details,
        )
    else:
        logger.info("%s %s -> %s %s", request.method, request.url.path, status, exc.error_code)
    return JSONResponse(status_code=status, content=exc.to_dict())


def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 when the request cannot be bound (wrong types, missing params)."""
    # ctx may hold exception instances, which are not JSON serializable.
    errors = [{k: v for k, v in err.items() if k != "ctx"} for err in exc.errors()]
    return _error_response(422, "VALIDATION_ERROR", "Request validation failed", errors)


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Unknown routes and method mismatches keep the common error shape."""
    return _error_response(exc.status_code, "HTTP_ERROR", exc.detail)


def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; the exception text is only exposed in debug mode."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    message = str(exc) if get_settings().debug else "Internal server error"
    return _error_response(500, "INTERNAL_ERROR", message)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app. Call once after creating it."""
    app.add_exception_handler(RegistryException, _registry_exception_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
