"""
FastAPI Middleware Layer.

- error_handling: catch-all for unhandled exceptions
- logging: structured request logging with correlation ids
- cors: CORS configuration from settings
"""

from .cors import configure_cors
from .error_handling import ErrorHandlingMiddleware, error_handling_middleware
from .logging import RequestLoggingMiddleware, request_logging_middleware

__all__ = [
    "ErrorHandlingMiddleware",
    "RequestLoggingMiddleware",
    "configure_cors",
    "error_handling_middleware",
    "request_logging_middleware",
]
