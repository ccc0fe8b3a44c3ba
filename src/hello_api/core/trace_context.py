"""Per-request trace id, shared between the middleware and the log filter"""

import contextvars

trace_id_context: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "hello_api_trace_id", default=None
)
