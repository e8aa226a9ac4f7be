"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health, invoices)
- Error handlers (centralized storage-error-to-HTTP mapping)
- Logging configuration

No business logic belongs here.
"""

from fastapi import FastAPI

from bindle.core.config import settings
from bindle.interfaces.health import router as health_router
from bindle.interfaces.invoice.router import router as invoice_router
from bindle.shared.errors.handlers import register_error_handlers
from bindle.shared.logging import configure_logging


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the server.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
    )

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(invoice_router, prefix=settings.api_prefix)

    return app


app = create_app()
