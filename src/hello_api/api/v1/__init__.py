"""
API v1 endpoints.

Route prefix constants for consistent API versioning.
"""

# Greeting and health live at the root; versioned metadata under /api
API_V1_PREFIX: str = "/api"

__all__ = [
    "API_V1_PREFIX",
]
