"""
Global error handling middleware.

Catches anything the exception handlers did not, logs it with the request
context and answers with a generic 500 that leaks no internals.
"""

import structlog
from fastapi import Request, Response, status
from fastapi.responses import JSONResponse

from ...config import get_logger
from ..responses import error_body

GENERIC_ERROR_MESSAGE = "An internal server error occurred"


class ErrorHandlingMiddleware:
    """Turns unhandled exceptions into ``500 {"error": ...}`` responses."""

    def __init__(self, logger_name: str = "error_handler"):
        self.logger = get_logger(logger_name)

    async def __call__(self, request: Request, call_next) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            request_id = structlog.contextvars.get_contextvars().get("request_id")
            self.logger.error(
                f"Unhandled exception occurred: {type(e).__name__}",
                request_id=request_id,
                path=str(request.url.path),
                method=request.method,
                error_message=str(e),
                exc_info=True,
            )
            response = JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=error_body(GENERIC_ERROR_MESSAGE)
            )
            if request_id:
                response.headers["X-Request-ID"] = request_id
            return response


error_handling_middleware = ErrorHandlingMiddleware()

__all__ = [
    "ErrorHandlingMiddleware",
    "error_handling_middleware",
    "GENERIC_ERROR_MESSAGE",
]
