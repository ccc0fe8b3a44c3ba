"""Version and environment endpoint."""
