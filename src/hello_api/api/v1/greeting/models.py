"""Greeting response models."""

from pydantic import BaseModel, Field

GREETING_MESSAGE = "Hello World! 🚀"


class GreetingResponse(BaseModel):
    """Greeting response."""

    message: str = Field(default=GREETING_MESSAGE, description="Greeting text")

    model_config = {"json_schema_extra": {"examples": [{"message": GREETING_MESSAGE}]}}
