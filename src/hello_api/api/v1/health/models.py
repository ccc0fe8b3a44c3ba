"""Health check response models."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy"] = Field(default="healthy", description="Service status")
    timestamp: str = Field(
        ..., description="Server time when the check ran (ISO 8601, UTC)"
    )
