"""
Request/response logging middleware.

Binds a request id into the structlog context for the duration of a request,
logs its start and end, and echoes correlation headers on the response.
"""

import time
import uuid

import structlog
from fastapi import Request, Response

from ...config import get_logger


class RequestLoggingMiddleware:
    """Structured logging of HTTP requests with correlation ids."""

    def __init__(self, logger_name: str = "api.requests", exclude_paths: list[str] | None = None):
        """
        Initialize request logging middleware.

        Args:
            logger_name: Name for the request logger
            exclude_paths: Path prefixes that are not logged (e.g., health checks)
        """
        self.logger = get_logger(logger_name)
        self.exclude_paths = exclude_paths or ["/api/health", "/docs", "/openapi.json"]

    async def __call__(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        path = str(request.url.path)
        quiet = any(path.startswith(prefix) for prefix in self.exclude_paths)

        start_time = time.perf_counter()
        if not quiet:
            self.logger.info("Request started", method=request.method, path=path, client=self._get_client_ip(request))

        response = await call_next(request)

        processing_time = time.perf_counter() - start_time
        if not quiet:
            self.logger.info(
                "Request completed",
                method=request.method,
                path=path,
                status_code=response.status_code,
                processing_time_ms=round(processing_time * 1000, 2),
            )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Processing-Time"] = f"{processing_time:.4f}"
        return response

    def _get_client_ip(self, request: Request) -> str:
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            return forwarded.split(",")[0].strip()
        return request.client.host if request.client else "unknown"


request_logging_middleware = RequestLoggingMiddleware()

__all__ = [
    "RequestLoggingMiddleware",
    "request_logging_middleware",
]
