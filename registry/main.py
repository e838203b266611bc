"""FastAPI application entry point.

Wiring only: logging, lifespan, exception handlers, middleware, routers and
optional tracing.
See registry.core.lifespan and registry.core.exception_handlers.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from registry.api.v1 import api_router
from registry.core.config import get_settings
from registry.core.exception_handlers import register_exception_handlers
from registry.core.lifespan import create_lifespan
from registry.middleware import RequestIDMiddleware
from registry.shared.logging import setup_logging
from registry.shared.telemetry import init_telemetry


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    settings = get_settings()
    setup_logging()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    register_exception_handlers(app)

    # Last added = outermost: request ID wraps CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)

    app.include_router(api_router, prefix="/api/v1")
    init_telemetry(app, settings)
    return app


app = create_app()
