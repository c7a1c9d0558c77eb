"""Read and delete operations over stored incident records."""

from ..config import get_logger
from ..models import IncidentRecord
from ..repositories import IncidentRepository


class QueryService:
    def __init__(self, repository: IncidentRepository):
        self.repository = repository
        self.logger = get_logger("service.query")

    async def list_by_department(self, department: str) -> list[IncidentRecord]:
        """Records of one department, oldest time first."""
        records = await self.repository.find_by_department(department)
        self.logger.info("Listed incident records", department=department, count=len(records))
        return records

    async def delete_by_id(self, record_id: str) -> None:
        await self.repository.delete_by_id(record_id)
