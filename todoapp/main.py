"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (tasks, catalog, health)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- Database schema creation on start-up

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from todoapp.core.config import settings
from todoapp.infrastructure.tasks.schema import create_schema
from todoapp.interfaces.health import router as health_router
from todoapp.interfaces.tasks.catalog_router import router as catalog_router
from todoapp.interfaces.tasks.dependencies import get_engine
from todoapp.interfaces.tasks.router import router as tasks_router
from todoapp.shared.errors.handlers import register_error_handlers
from todoapp.shared.logging import configure_logging
from todoapp.shared.security.headers import SecurityHeadersMiddleware
from todoapp.shared.security.rate_limiting import limiter, rate_limit_exceeded_handler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: make sure the schema exists before serving."""
    create_schema(get_engine())
    logger.info("%s %s started", settings.project_name, settings.version)
    yield
    get_engine().dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(catalog_router, prefix="/api/v1")
    app.include_router(tasks_router, prefix="/api/v1")

    return app


app = create_app()
