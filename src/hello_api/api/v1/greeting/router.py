"""Greeting API Routes - Route registration only."""

from fastapi import APIRouter

from hello_api.api.v1.greeting import api

router = APIRouter()
router.include_router(api.router, tags=["Greeting"])
