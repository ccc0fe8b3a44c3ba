"""Tests for OpenAPI schema customization."""

from fastapi import FastAPI

from hello_api.application import create_app
from hello_api.config import Settings
from hello_api.openapi import PROBLEM_DETAIL_REF, custom_openapi


def test_custom_openapi_generates_schema():
    """Test that custom_openapi generates a valid OpenAPI schema."""
    app = FastAPI(version="1.0.0")

    @app.get("/test")
    async def test_endpoint():
        return {"message": "test"}

    schema = custom_openapi(app)

    assert "openapi" in schema
    assert schema["info"]["version"] == "1.0.0"
    assert "ProblemDetail" in schema["components"]["schemas"]


def test_custom_openapi_caches_schema():
    """Test that custom_openapi caches the schema after first generation."""
    app = FastAPI(version="1.0.0")

    schema1 = custom_openapi(app)
    schema2 = custom_openapi(app)

    assert schema1 is schema2


def test_custom_openapi_returns_existing_schema():
    """Test that custom_openapi returns existing schema if already set."""
    app = FastAPI()
    existing_schema = {
        "openapi": "3.0.0",
        "info": {"title": "Test", "version": "1.0.0"},
    }
    app.openapi_schema = existing_schema

    assert custom_openapi(app) is existing_schema


def test_custom_openapi_documents_all_routes(app):
    """Test the three endpoints and their error responses are documented."""
    schema = app.openapi()

    assert set(schema["paths"]) == {"/", "/health", "/api/version"}
    for path in schema["paths"].values():
        responses = path["get"]["responses"]
        assert responses["404"]["content"]["application/json"]["schema"] == {
            "$ref": PROBLEM_DETAIL_REF
        }
        assert "500" in responses


def test_docs_routes_disabled_by_default(client):
    for path in ("/docs", "/redoc", "/openapi.json"):
        assert client.get(path).status_code == 404


def test_docs_routes_enabled():
    from fastapi.testclient import TestClient

    app = create_app(Settings(_env_file=None, enable_docs=True, environment="test"))

    with TestClient(app) as client:
        response = client.get("/openapi.json")

    assert response.status_code == 200
    assert response.json()["info"]["title"] == "Hello API"
