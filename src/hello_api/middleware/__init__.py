"""
Middleware to add trace_id to each request.

The trace_id allows tracking logs from the same HTTP request throughout
the entire application, facilitating debugging and observability.
"""

import uuid
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from hello_api.core.logging import logger
from hello_api.core.trace_context import trace_id_context

TRACE_ID_HEADER = "X-Trace-ID"


class TraceIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that adds a unique trace_id to each request.

    Flow:
    1. Request arrives → generates UUID as trace_id
    2. Stores trace_id in contextvars
    3. All logs automatically include the trace_id
    4. Response includes X-Trace-ID header
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """
        Processes the request by adding trace_id.

        Args:
            request: HTTP request
            call_next: Next middleware/handler

        Returns:
            Response with X-Trace-ID header
        """
        trace_id = str(uuid.uuid4())
        token = trace_id_context.set(trace_id)

        logger.debug(f"Request started: {request.method} {request.url.path}")

        try:
            response = await call_next(request)
            response.headers[TRACE_ID_HEADER] = trace_id

            logger.debug(
                f"Request completed: {request.method} {request.url.path} - Status: {response.status_code}"  # noqa: E501
            )
            return response

        except Exception:
            logger.exception(f"Request failed: {request.method} {request.url.path}")
            raise

        finally:
            trace_id_context.reset(token)


__all__ = ["TraceIDMiddleware", "TRACE_ID_HEADER"]
