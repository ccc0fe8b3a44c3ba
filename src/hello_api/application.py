"""
FastAPI application factory.

Creates and configures the FastAPI application with all middleware,
routers, and exception handlers.
"""

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from hello_api import __version__
from hello_api.config import Settings, get_settings
from hello_api.core.logging import logger
from hello_api.exception_handlers import (
    general_exception_handler,
    http_exception_handler,
)
from hello_api.lifespan import lifespan
from hello_api.middleware import TraceIDMiddleware
from hello_api.openapi import configure_openapi
from hello_api.routes import register_routes


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration for this application. Defaults to the
            process settings read from the environment.

    Returns:
        Configured FastAPI application instance
    """
    if settings is None:
        settings = get_settings()

    # Configure docs URLs based on settings
    # Must be set BEFORE creating FastAPI instance
    docs_url = "/docs" if settings.enable_docs else None
    redoc_url = "/redoc" if settings.enable_docs else None
    openapi_url = "/openapi.json" if settings.enable_docs else None

    app = FastAPI(
        title=settings.project_name,
        description=settings.project_description,
        version=__version__,
        lifespan=lifespan,
        docs_url=docs_url,
        redoc_url=redoc_url,
        openapi_url=openapi_url,
        # "/health/" is a different path from "/health"
        redirect_slashes=False,
    )
    app.state.settings = settings

    # Register exception handlers (RFC 7807 Problem Details)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.add_middleware(TraceIDMiddleware)

    register_routes(app)

    configure_openapi(app)

    logger.info(f"FastAPI application created (v{__version__}, {settings.environment})")

    return app
