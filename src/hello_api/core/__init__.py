"""Cross-cutting infrastructure: logging and request context."""
