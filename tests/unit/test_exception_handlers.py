"""
Unit tests for exception handlers.

Tests error response formatting and status code mapping.
"""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from hello_api import exception_handlers
from hello_api.exception_handlers import (
    INTERNAL_ERROR_DETAIL,
    NOT_FOUND_DETAIL,
    general_exception_handler,
    http_exception_handler,
    problem_response,
)


@pytest.fixture
def request_mock():
    request = MagicMock(spec=Request)
    request.method = "GET"
    request.url.path = "/home/user/secret"
    return request


def body_of(response) -> dict:
    return json.loads(response.body)


# ===========================
# HTTP Exception Handler Tests
# ===========================


@pytest.mark.asyncio
async def test_http_exception_handler_404(request_mock):
    """Test HTTP exception handler with 404 not found."""
    exc = StarletteHTTPException(status_code=404)

    response = await http_exception_handler(request_mock, exc)

    assert response.status_code == 404
    body = body_of(response)
    assert body["title"] == "Not Found"
    assert body["status"] == 404
    assert body["detail"] == NOT_FOUND_DETAIL
    assert "/home/" not in response.body.decode()


@pytest.mark.asyncio
async def test_http_exception_handler_maps_405_to_404(request_mock):
    """Test a wrong method on a known path is reported as not found."""
    exc = StarletteHTTPException(status_code=405, headers={"Allow": "GET"})

    response = await http_exception_handler(request_mock, exc)

    assert response.status_code == 404
    assert "allow" not in response.headers
    assert body_of(response)["status"] == 404


@pytest.mark.asyncio
async def test_http_exception_handler_other_status(request_mock):
    """Test other statuses keep their code but not the raw detail."""
    exc = HTTPException(status_code=400, detail="Traceback at /srv/app.py")

    response = await http_exception_handler(request_mock, exc)

    assert response.status_code == 400
    body = body_of(response)
    assert body["title"] == "Bad Request"
    assert "Traceback" not in response.body.decode()


@pytest.mark.asyncio
async def test_http_exception_handler_keeps_headers(request_mock):
    exc = HTTPException(status_code=503, headers={"Retry-After": "5"})

    response = await http_exception_handler(request_mock, exc)

    assert response.status_code == 503
    assert response.headers["retry-after"] == "5"


# ===========================
# General Exception Handler Tests
# ===========================


@pytest.mark.asyncio
async def test_general_exception_handler_hides_details(request_mock):
    exc = RuntimeError("database password is hunter2")

    response = await general_exception_handler(request_mock, exc)

    assert response.status_code == 500
    body = body_of(response)
    assert body["detail"] == INTERNAL_ERROR_DETAIL
    assert "hunter2" not in response.body.decode()
    assert "RuntimeError" not in response.body.decode()


def test_problem_response_content_type():
    response = problem_response(404, NOT_FOUND_DETAIL)

    assert response.headers["content-type"].startswith("application/json")


def test_app_registers_only_problem_handlers(app):
    """Only the 404 fallback and the 500 handler are installed by the app."""
    assert app.exception_handlers[StarletteHTTPException] is http_exception_handler
    assert app.exception_handlers[Exception] is general_exception_handler
    assert not hasattr(exception_handlers, "validation_exception_handler")
