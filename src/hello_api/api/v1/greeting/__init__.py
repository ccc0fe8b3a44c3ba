"""Greeting endpoint."""
