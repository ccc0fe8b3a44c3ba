"""Version API Routes - Route registration only."""

from fastapi import APIRouter

from hello_api.api.v1.version import api

# Mounted under API_V1_PREFIX by hello_api.routes
router = APIRouter()
router.include_router(api.router, tags=["Version"])
