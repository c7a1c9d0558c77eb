"""Core building blocks shared by every layer."""

from .exceptions import EmptyTextError, OracleError, RecordProcessingError, RepositoryError, SirenError

__all__ = [
    "SirenError",
    "EmptyTextError",
    "OracleError",
    "RecordProcessingError",
    "RepositoryError",
]
