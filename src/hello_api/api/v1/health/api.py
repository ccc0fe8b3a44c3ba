"""
Health check endpoints.

Provides the liveness endpoint used by load balancers and orchestrators.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from hello_api.api.v1.health.models import HealthResponse

router = APIRouter()


def utc_timestamp() -> str:
    """
    Current UTC time as ISO 8601 with millisecond precision.

    Returns:
        Timestamp such as ``2026-10-19T08:15:30.123Z``
    """
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint.

    Returns:
        Service status and the time the check was handled
    """
    return HealthResponse(status="healthy", timestamp=utc_timestamp())
