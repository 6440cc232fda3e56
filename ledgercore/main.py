"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers
- Error handlers (centralized error-to-HTTP mapping)
- Rate limiting
- Logging configuration

No business logic belongs here.
"""

from fastapi import FastAPI

from ledgercore.core.config import settings
from ledgercore.interfaces.catalog import router as catalog_router
from ledgercore.interfaces.health import router as health_router
from ledgercore.shared.errors.handlers import register_error_handlers
from ledgercore.shared.logging import configure_logging
from ledgercore.shared.security.rate_limiting import limiter


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and the rate limiter.
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
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(catalog_router, prefix=settings.api_prefix)

    return app


app = create_app()
