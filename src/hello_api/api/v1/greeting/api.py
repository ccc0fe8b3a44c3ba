"""Greeting endpoint served at the root path."""

from fastapi import APIRouter

from hello_api.api.v1.greeting.models import GreetingResponse

router = APIRouter()


@router.get("/", response_model=GreetingResponse)
async def greeting() -> GreetingResponse:
    """Return the static greeting. Query parameters and headers are ignored."""
    return GreetingResponse()
