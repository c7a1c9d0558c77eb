"""
Exception handlers for FastAPI.

Maps the application's error hierarchy onto HTTP statuses and the
``{"error": ...}`` body.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ...config import get_logger
from ...core.exceptions import EmptyTextError, RecordProcessingError, RepositoryError, SirenError
from .exceptions import APIException, error_body

logger = get_logger("app.exception_handlers")

_STATUS_BY_ERROR: dict[type[SirenError], int] = {
    EmptyTextError: status.HTTP_400_BAD_REQUEST,
    RecordProcessingError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    RepositoryError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _status_for(exc: SirenError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
    logger.warning(
        "API exception",
        error_code=exc.error_code,
        status_code=exc.status_code,
        path=request.url.path,
        method=request.method,
    )
    return JSONResponse(status_code=exc.status_code, content=error_body(str(exc.detail)), headers=exc.headers)


async def siren_error_handler(request: Request, exc: SirenError) -> JSONResponse:
    status_code = _status_for(exc)
    log = logger.warning if status_code < 500 else logger.error
    log(
        "Application error",
        error_code=exc.error_code,
        status_code=status_code,
        error=exc.message,
        path=request.url.path,
        method=request.method,
    )
    return JSONResponse(status_code=status_code, content=error_body(exc.message))


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        # Drop the leading "body"/"query" segment
        field_path = ".".join(str(loc) for loc in error["loc"][1:])
        parts.append(f"{field_path}: {error['msg']}" if field_path else error["msg"])
    return "; ".join(parts)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Handle FastAPI request validation errors.

    A body that does not fit the request schema (for example a non-string
    ``text``) is a client error and is answered with 400 and the usual
    ``{"error": ...}`` body instead of FastAPI's 422 detail list.
    """
    message = f"Invalid request: {_describe_validation_errors(exc)}"
    logger.warning(
        "Validation error",
        error=message,
        error_count=len(exc.errors()),
        path=request.url.path,
        method=request.method,
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error_body(message))


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers to an application."""
    app.add_exception_handler(APIException, api_exception_handler)
    app.add_exception_handler(SirenError, siren_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
