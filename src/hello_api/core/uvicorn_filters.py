"""
Custom logging filters for Uvicorn to reduce noise in logs.

Health checks hit the service every few seconds; their access lines
are dropped before they reach loguru.
"""

import logging


class HealthCheckFilter(logging.Filter):
    """
    Filter to exclude health check requests from Uvicorn access logs.
    """

    EXCLUDED_PATHS = {"/health"}

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Determine if a log record should be logged.

        Uvicorn access records carry ``(client, method, path, http_version,
        status)`` as args; the rendered message is checked as a fallback.

        Args:
            record: Log record from Uvicorn

        Returns:
            False if the request path should be excluded, True otherwise
        """
        args = record.args
        if isinstance(args, tuple) and len(args) >= 3:
            path = str(args[2]).split("?", 1)[0]
            return path not in self.EXCLUDED_PATHS

        # Example: '127.0.0.1:43306 - "GET /health HTTP/1.1" 200'
        message = record.getMessage()
        for path in self.EXCLUDED_PATHS:
            if f" {path} " in message or f" {path}?" in message:
                return False

        return True


def install_health_check_filter() -> None:
    """Attach ``HealthCheckFilter`` to the uvicorn access logger."""
    access_logger = logging.getLogger("uvicorn.access")
    if not any(isinstance(f, HealthCheckFilter) for f in access_logger.filters):
        access_logger.addFilter(HealthCheckFilter())
