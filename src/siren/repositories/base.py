"""Abstract repository interface for incident record persistence."""

from abc import ABC, abstractmethod

from ..models import IncidentRecord


class IncidentRepository(ABC):
    """
    Contract for incident record storage implementations.

    Implementations do no validation: every field except ``id`` is an
    arbitrary string or null.
    """

    @abstractmethod
    async def save(self, record: IncidentRecord) -> IncidentRecord:
        """Insert a record, or upsert it when it already carries an id.

        Args:
            record: The record to persist

        Returns:
            The persisted record, carrying its id

        Raises:
            RepositoryError: When the store rejects the write
        """

    @abstractmethod
    async def find_by_department(self, department: str) -> list[IncidentRecord]:
        """Find records whose department matches exactly, oldest time first.

        Times are compared as stored strings; records without a time sort first.

        Raises:
            RepositoryError: When the query fails
        """

    @abstractmethod
    async def delete_by_id(self, record_id: str) -> None:
        """Delete a record by id. Unknown ids are ignored.

        Raises:
            RepositoryError: When the delete fails
        """

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is reachable."""

    async def close(self) -> None:
        """Release any connections held by the repository."""
