"""OpenAPI schema customization for the Hello API."""

from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from hello_api.models.errors import ProblemDetail

PROBLEM_DETAIL_REF = "#/components/schemas/ProblemDetail"


def custom_openapi(app: FastAPI) -> dict[str, Any]:
    """Generate customized OpenAPI schema for the API.

    Args:
        app: The FastAPI application instance.

    Returns:
        Customized OpenAPI schema dictionary.
    """
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description="""
# Hello API

Three read-only JSON endpoints.

## API Endpoints

- `GET /` - Greeting
- `GET /health` - Liveness check with the current server time
- `GET /api/version` - Service version and deployment environment

## Error Handling

Every other method or path answers `404` with an
[RFC 7807 Problem Details](https://datatracker.ietf.org/doc/html/rfc7807) body:

```json
{
  "type": "https://datatracker.ietf.org/doc/html/rfc7231#section-6.5.4",
  "title": "Not Found",
  "status": 404,
  "detail": "The requested resource was not found."
}
```
        """,
        routes=app.routes,
        license_info={
            "name": "MIT License",
            "url": "https://opensource.org/licenses/MIT",
        },
    )

    openapi_schema["tags"] = [
        {"name": "Greeting", "description": "Static greeting"},
        {"name": "Health", "description": "Health check endpoints for monitoring"},
        {"name": "Version", "description": "Version and environment report"},
    ]

    components = openapi_schema.setdefault("components", {})
    schemas = components.setdefault("schemas", {})
    schemas["ProblemDetail"] = ProblemDetail.model_json_schema(
        ref_template="#/components/schemas/{model}"
    )

    for path in openapi_schema.get("paths", {}).values():
        for operation in path.values():
            if isinstance(operation, dict) and "responses" in operation:
                operation["responses"]["404"] = {
                    "description": "Not Found",
                    "content": {
                        "application/json": {"schema": {"$ref": PROBLEM_DETAIL_REF}}
                    },
                }
                operation["responses"]["500"] = {
                    "description": "Internal Server Error",
                    "content": {
                        "application/json": {"schema": {"$ref": PROBLEM_DETAIL_REF}}
                    },
                }

    app.openapi_schema = openapi_schema
    return app.openapi_schema


def configure_openapi(app: FastAPI) -> None:
    """Configure the FastAPI app to use custom OpenAPI schema.

    Args:
        app: The FastAPI application instance.
    """
    app.openapi = lambda: custom_openapi(app)  # type: ignore[method-assign]
