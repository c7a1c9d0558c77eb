"""Exception hierarchy for the SIREN incident service."""

from typing import Any


class SirenError(Exception):
    """Base exception for all application errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__.upper()
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the exception."""
        if self.details:
            return f"{self.message}. Details: {self.details}"
        return self.message


class EmptyTextError(SirenError):
    """Raised when a report arrives without any text to extract from."""

    def __init__(self, message: str = "Text is missing") -> None:
        super().__init__(message, "TEXT_MISSING")


class OracleError(SirenError):
    """The extraction oracle could not produce a usable reply."""

    def __init__(self, message: str, provider: str = "gemini", original_error: Exception | None = None) -> None:
        super().__init__(message, "ORACLE_ERROR", {"provider": provider})
        self.provider = provider
        self.original_error = original_error


class RecordProcessingError(SirenError):
    """A payload could not be turned into an incident record and saved."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message, "RECORD_PROCESSING_ERROR")
        self.original_error = original_error


class RepositoryError(SirenError):
    """The record store failed."""

    def __init__(self, message: str, operation: str, original_error: Exception | None = None) -> None:
        super().__init__(message, "REPOSITORY_ERROR", {"operation": operation})
        self.operation = operation
        self.original_error = original_error
