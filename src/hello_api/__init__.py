"""Hello API: a minimal JSON HTTP service."""

__version__ = "1.0.0"
