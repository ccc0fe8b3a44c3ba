"""
Models package.

Contains shared Pydantic models used across multiple modules.
Endpoint-specific models are located in their respective module directories.
"""

from hello_api.models.errors import ProblemDetail

__all__ = [
    "ProblemDetail",
]
