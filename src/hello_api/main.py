"""
Main FastAPI application entry point.

This module creates the FastAPI application using the application factory
pattern and serves it with the uvicorn-backed listener.
"""

from hello_api.application import create_app
from hello_api.config import settings
from hello_api.core.logging import intercept_standard_logging, logger
from hello_api.listener import Listener, ListenerStartupError

# Intercept logs from uvicorn and other libraries
intercept_standard_logging()

# Create FastAPI application using factory
app = create_app(settings)


def run() -> None:
    """Serve ``app`` until interrupted. A port that cannot be bound is fatal."""
    listener = Listener(app, settings)
    try:
        listener.serve()
    except ListenerStartupError as exc:
        logger.error(f"Startup failed: {exc}")
        raise SystemExit(1) from exc


if __name__ == "__main__":
    run()
