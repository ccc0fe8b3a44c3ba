"""
Application lifecycle management.

Handles startup and shutdown events for the FastAPI application.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    There are no resources to open or close; startup and shutdown are
    only logged.

    Args:
        app: FastAPI application instance
    """
    settings = getattr(app.state, "settings", None)
    environment = settings.environment if settings is not None else "unknown"

    logger.info(f"Starting hello-api v{app.version} ({environment})")

    yield

    logger.info("Shutting down hello-api")
