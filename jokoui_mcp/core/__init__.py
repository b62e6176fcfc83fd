"""Core infrastructure: logging setup and the error taxonomy."""
