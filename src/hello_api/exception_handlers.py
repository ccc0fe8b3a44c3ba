"""Global exception handlers for standardized error responses.

Implements RFC 7807 Problem Details for HTTP APIs.

Unknown paths and known paths requested with an unsupported method both
resolve to 404. Error bodies never echo the request path or query and never
carry exception text.
"""

from http import HTTPStatus

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from hello_api.core.logging import logger
from hello_api.models.errors import ProblemDetail

NOT_FOUND_DETAIL = "The requested resource was not found."
INTERNAL_ERROR_DETAIL = "An unexpected error occurred. Please try again later."


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def problem_response(
    status_code: int,
    detail: str | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build a ProblemDetail JSON response for ``status_code``.

    Args:
        status_code: HTTP status of the response.
        detail: Optional human-readable explanation.
        headers: Optional extra response headers.

    Returns:
        JSONResponse with ProblemDetail body.
    """
    status_code = int(status_code)
    problem_detail = ProblemDetail(
        title=_reason_phrase(status_code),
        status=status_code,
        detail=detail,
    )
    return JSONResponse(
        status_code=status_code,
        content=problem_detail.model_dump(exclude_none=True),
        headers=headers,
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:  # noqa: ASYNC100
    """Handle HTTPException with RFC 7807 ProblemDetail response.

    Starlette raises 404 for unknown paths and 405 for known paths with
    another method; both become a plain 404 without an ``Allow`` header.

    Args:
        request: The FastAPI request object.
        exc: The HTTPException that was raised.

    Returns:
        JSONResponse with ProblemDetail body.
    """
    if exc.status_code in (HTTPStatus.NOT_FOUND, HTTPStatus.METHOD_NOT_ALLOWED):
        logger.bind(status_code=exc.status_code).info(
            f"No route for {request.method} {request.url.path}"
        )
        return problem_response(HTTPStatus.NOT_FOUND, NOT_FOUND_DETAIL)

    logger.bind(status_code=exc.status_code).warning(
        f"HTTPException: {exc.status_code} on {request.method} {request.url.path}"
    )
    return problem_response(
        exc.status_code, _reason_phrase(exc.status_code), headers=exc.headers
    )


async def general_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:  # noqa: ASYNC100
    """Handle unexpected exceptions with 500 Internal Server Error.

    Args:
        request: The FastAPI request object.
        exc: The exception that was raised.

    Returns:
        JSONResponse with ProblemDetail body.
    """
    logger.bind(exception_type=type(exc).__name__).exception(
        f"Unexpected error on {request.method} {request.url.path}"
    )
    return problem_response(HTTPStatus.INTERNAL_SERVER_ERROR, INTERNAL_ERROR_DETAIL)
