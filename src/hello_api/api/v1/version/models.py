"""Version response models."""

from pydantic import BaseModel, Field

from hello_api.config import Environment


class VersionResponse(BaseModel):
    """Version and deployment environment of the running service."""

    version: str = Field(..., pattern=r"^\d+\.\d+\.\d+$", description="Semantic version")
    environment: Environment = Field(..., description="Deployment environment")
