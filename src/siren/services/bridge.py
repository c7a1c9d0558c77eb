"""Glue between raw JSON payloads and the record store."""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from ..config import get_logger
from ..core.exceptions import RecordProcessingError
from ..models import Department, IncidentRecord
from ..repositories import IncidentRepository


class IncidentBridgeService:
    """Turns JSON payloads into incident records and saves them."""

    def __init__(self, repository: IncidentRepository):
        self.repository = repository
        self.logger = get_logger("service.bridge")

    async def ingest(self, payload: str | bytes | Mapping[str, Any]) -> IncidentRecord:
        """Deserialize a payload into an incident record and persist it.

        Unknown keys are ignored and missing ones stay null.

        Args:
            payload: JSON text or an already decoded mapping

        Returns:
            The persisted record, carrying its id

        Raises:
            RecordProcessingError: If the payload is not a valid record; nothing is saved
        """
        try:
            if isinstance(payload, (str, bytes)):
                record = IncidentRecord.model_validate_json(payload)
            else:
                record = IncidentRecord.model_validate(payload)
        except ValidationError as e:
            raise RecordProcessingError(f"Failed to parse and save incident record: {e}", original_error=e) from e

        if record.department is not None and Department.parse(record.department) is Department.UNKNOWN:
            self.logger.warning("Incident record has an unrecognized department", department=record.department)

        return await self.repository.save(record)
