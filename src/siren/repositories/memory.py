"""In-process incident repository for local runs and tests."""

from bson import ObjectId

from ..models import IncidentRecord
from .base import IncidentRepository


class InMemoryIncidentRepository(IncidentRepository):
    """Keeps records in a dict, mimicking the MongoDB repository's ordering."""

    def __init__(self) -> None:
        self._records: dict[str, IncidentRecord] = {}

    async def save(self, record: IncidentRecord) -> IncidentRecord:
        stored = record if record.id else record.model_copy(update={"id": str(ObjectId())})
        self._records[stored.id] = stored
        return stored

    async def find_by_department(self, department: str) -> list[IncidentRecord]:
        matches = [record for record in self._records.values() if record.department == department]
        # Missing times first, then plain string order
        return sorted(matches, key=lambda record: (record.time is not None, record.time or ""))

    async def delete_by_id(self, record_id: str) -> None:
        self._records.pop(record_id, None)

    async def health_check(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self._records)
