"""API middleware for Brandmark."""

from brandmark.api.middleware.logging import LoggingMiddleware

__all__ = [
    "LoggingMiddleware",
]
