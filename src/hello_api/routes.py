"""
Routes registration for the FastAPI application.

Centralizes all router registrations for clean application setup.
"""

from fastapi import FastAPI

from hello_api.api.v1 import API_V1_PREFIX
from hello_api.api.v1.greeting.router import router as greeting_router
from hello_api.api.v1.health.router import router as health_router
from hello_api.api.v1.version.router import router as version_router


def register_routes(app: FastAPI) -> None:
    """
    Register all application routers.

    Args:
        app: FastAPI application instance
    """
    # GET /
    app.include_router(greeting_router)

    # GET /health
    app.include_router(health_router)

    # GET /api/version
    app.include_router(version_router, prefix=API_V1_PREFIX)
