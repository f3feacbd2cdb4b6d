"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (catalog and health)
- Repositories (in-memory or SQLAlchemy, per settings)
- Error handlers (centralized exception-to-problem-details mapping)
- Middleware (request context, security headers, rate limiting)
- Logging configuration

No business logic belongs here.
"""

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI
from slowapi.middleware import SlowAPIMiddleware

from ticket_catalog.core.config import Settings, settings as default_settings
from ticket_catalog.domain.catalog.ports import EventRepository, VenueRepository
from ticket_catalog.infrastructure.catalog.memory_repository import (
    InMemoryEventRepository,
    InMemoryVenueRepository,
)
from ticket_catalog.infrastructure.catalog.sql_repository import (
    SqlEventRepository,
    SqlVenueRepository,
)
from ticket_catalog.infrastructure.database import (
    build_engine,
    build_session_factory,
    create_schema,
)
from ticket_catalog.interfaces.catalog.router import events_router, venues_router
from ticket_catalog.interfaces.health import router as health_router
from ticket_catalog.shared.errors.handlers import register_error_handlers
from ticket_catalog.shared.logging import configure_logging
from ticket_catalog.shared.middleware import RequestContextMiddleware
from ticket_catalog.shared.security.headers import SecurityHeadersMiddleware
from ticket_catalog.shared.security.rate_limiting import build_limiter

logger = logging.getLogger(__name__)


def build_repositories(settings: Settings) -> tuple[VenueRepository, EventRepository]:
    """Create the repository pair for the configured storage backend."""
    if settings.storage_backend == "sql":
        engine = build_engine(settings.database_url, echo=settings.database_echo)
        create_schema(engine)
        session_factory = build_session_factory(engine)
        return SqlVenueRepository(session_factory), SqlEventRepository(session_factory)
    return InMemoryVenueRepository(), InMemoryEventRepository()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Args:
        settings: Settings override, the environment-loaded ones by default.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.settings = settings

    # --- Storage ---
    venue_repository, event_repository = build_repositories(settings)
    app.state.venue_repository = venue_repository
    app.state.event_repository = event_repository

    # --- Middleware (last added runs first) ---
    app.state.limiter = build_limiter(settings)
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(venues_router, prefix=settings.api_prefix)
    app.include_router(events_router, prefix=settings.api_prefix)

    logger.info(
        "Application created (storage=%s, rate_limit=%s)",
        settings.storage_backend,
        settings.rate_limit_default if settings.rate_limit_enabled else "off",
    )
    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run(
        "ticket_catalog.main:app",
        host=default_settings.host,
        port=default_settings.port,
        log_level=default_settings.log_level.lower(),
    )
