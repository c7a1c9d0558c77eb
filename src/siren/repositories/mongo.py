"""MongoDB implementation of the incident repository."""

from __future__ import annotations

from typing import Any

from bson import ObjectId
from pymongo import ASCENDING, AsyncMongoClient
from pymongo.errors import PyMongoError

from ..config import get_logger
from ..core.exceptions import RepositoryError
from ..models import IncidentRecord
from .base import IncidentRepository


def _to_key(record_id: str) -> ObjectId | str:
    """Store ObjectId-shaped ids as ObjectIds and anything else verbatim."""
    return ObjectId(record_id) if ObjectId.is_valid(record_id) else record_id


def _from_document(document: dict[str, Any]) -> IncidentRecord:
    data = dict(document)
    raw_id = data.pop("_id", None)
    data["id"] = str(raw_id) if raw_id is not None else None
    return IncidentRecord.model_validate(data)


class MongoIncidentRepository(IncidentRepository):
    """Incident repository backed by a MongoDB collection."""

    def __init__(self, collection: Any, client: AsyncMongoClient | None = None):
        """Initialize the repository.

        Args:
            collection: Async collection holding the incident documents
            client: Owning client, closed together with the repository
        """
        self._collection = collection
        self._client = client
        self.logger = get_logger("repository.mongo")

    @classmethod
    def from_uri(cls, uri: str, database: str, collection: str, timeout_ms: int = 5000) -> MongoIncidentRepository:
        """Create a repository with its own client.

        The client connects lazily, so this does no network I/O.
        """
        client: AsyncMongoClient = AsyncMongoClient(uri, serverSelectionTimeoutMS=timeout_ms)
        return cls(client[database][collection], client=client)

    async def save(self, record: IncidentRecord) -> IncidentRecord:
        document = record.to_document()
        try:
            if record.id:
                await self._collection.replace_one({"_id": _to_key(record.id)}, document, upsert=True)
                record_id = record.id
            else:
                result = await self._collection.insert_one(document)
                record_id = str(result.inserted_id)
        except PyMongoError as e:
            raise RepositoryError(f"Failed to save incident record: {e}", operation="save", original_error=e) from e

        self.logger.info("Incident record saved", record_id=record_id, department=record.department)
        return record.model_copy(update={"id": record_id})

    async def find_by_department(self, department: str) -> list[IncidentRecord]:
        try:
            cursor = self._collection.find({"department": department}).sort("time", ASCENDING)
            documents = await cursor.to_list(None)
        except PyMongoError as e:
            raise RepositoryError(
                f"Failed to query incident records: {e}", operation="find_by_department", original_error=e
            ) from e

        return [_from_document(document) for document in documents]

    async def delete_by_id(self, record_id: str) -> None:
        try:
            result = await self._collection.delete_one({"_id": _to_key(record_id)})
        except PyMongoError as e:
            raise RepositoryError(f"Failed to delete incident record: {e}", operation="delete", original_error=e) from e

        self.logger.info("Incident record delete requested", record_id=record_id, deleted=result.deleted_count)

    async def health_check(self) -> bool:
        if self._client is None:
            return True
        try:
            await self._client.admin.command("ping")
            return True
        except PyMongoError as e:
            self.logger.warning("MongoDB health check failed", error=str(e))
            return False

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
