"""Error response models following RFC 7807 Problem Details."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

status_to_section: dict[int, str] = {
    404: "6.5.4",
    500: "6.6.1",
}


def get_rfc_section_url(status: int) -> str:
    """Get the RFC section URL for a given HTTP status code.

    Args:
        status: The HTTP status code.

    Returns:
        The URL to the corresponding section in the RFC.
    """
    base_url = "https://datatracker.ietf.org/doc/html/rfc7231#section-"
    section = status_to_section.get(status)
    if section is None:
        return f"{base_url}6.6.1"  # Default to 500 Internal Server Error
    return f"{base_url}{section}"


class ProblemDetail(BaseModel):
    """Problem Detail response as defined in RFC 7807.

    Every non-2xx response of the service uses this body. It never carries
    the request path, query or any exception text.

    Attributes:
        type: URI reference to the problem type (auto-generated from status).
        title: Short, human-readable summary of the problem type.
        status: HTTP status code.
        detail: Human-readable explanation specific to this occurrence.

    Example:
        ```python
        problem = ProblemDetail(
            title="Not Found",
            status=404,
            detail="The requested resource was not found.",
        )
        ```
    """

    type: str | None = Field(
        default=None,
        description="URI reference to the problem type (RFC 7807)",
        json_schema_extra={
            "example": "https://datatracker.ietf.org/doc/html/rfc7231#section-6.5.4"
        },
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        json_schema_extra={"example": "Not Found"},
    )
    status: int = Field(
        ...,
        description="HTTP status code",
        json_schema_extra={"example": 404},
    )
    detail: str | None = Field(
        default=None,
        description="Human-readable explanation",
        json_schema_extra={"example": "The requested resource was not found."},
    )

    @model_validator(mode="before")
    @classmethod
    def set_default_type(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Set the default type based on the status if not provided.

        Args:
            values: The model values.

        Returns:
            Updated values with type set.
        """
        if "type" not in values or values["type"] is None:
            status = values.get("status", 500)
            values["type"] = get_rfc_section_url(status)
        return values
