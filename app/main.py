"""FastAPI application entry point.

Wiring only: context, logging, lifespan, exception handlers, middleware, routers.
No business logic here. See app.core.lifespan and app.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (or pass
their own Settings) before building an app.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import api_router
from app.core.config import Settings, get_settings
from app.core.context import AppContext
from app.core.exception_handlers import register_exception_handlers
from app.core.lifespan import create_lifespan
from app.middleware import (
    AuthenticationMiddleware,
    CaselessPathMiddleware,
    RequestIDMiddleware,
    TimeoutMiddleware,
    UnhandledErrorMiddleware,
)
from app.shared.telemetry.logging import setup_logging


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )
    app.state.context = AppContext.from_settings(settings)

    register_exception_handlers(app)

    # Middleware: last added = outermost.
    # Order (outer to inner): timeout → request ID → caseless path → CORS →
    # authentication → unhandled error.
    app.add_middleware(
        UnhandledErrorMiddleware, fallback_status=settings.internal_error_status
    )
    app.add_middleware(AuthenticationMiddleware, settings=settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(CaselessPathMiddleware)
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)
    app.add_middleware(
        TimeoutMiddleware,
        timeout_seconds=settings.request_timeout_seconds,
        header_name=settings.request_id_header,
    )

    app.include_router(api_router, prefix=settings.api_prefix)

    return app


app = create_app()
