"""
Custom API exception classes.

Every API error is rendered as ``{"error": <detail>}`` by the handlers in
:mod:`siren.api.responses.handlers`.
"""

from typing import Any

from fastapi import HTTPException, status


class APIException(HTTPException):
    """Base API exception carrying a machine-readable error code."""

    def __init__(
        self,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail: str = "Internal server error",
        error_code: str = "INTERNAL_ERROR",
        headers: dict[str, Any] | None = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code


class TextValidationException(APIException):
    """Raised when the intake body has no usable text."""

    def __init__(self, detail: str = "Text is missing"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail, error_code="TEXT_MISSING")


def error_body(message: str) -> dict[str, str]:
    """The single error shape returned by every endpoint."""
    return {"error": message}
