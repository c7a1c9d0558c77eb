"""
Record store router.

Department-filtered listing, deletion, and direct insertion of incident
records.
"""

from fastapi import APIRouter, Request, Response, status

from ...models import IncidentRecord
from ...services import IncidentBridgeService, QueryService
from ..dependencies import BridgeService, Queries

router = APIRouter(prefix="/siren/db", tags=["records"])

_RECORD_BODY = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {
                "schema": IncidentRecord.model_json_schema(),
                "example": {"name": "Kushwanth", "department": "IT", "status": "OPEN"},
            }
        },
    }
}


@router.get("/{department}", response_model=list[IncidentRecord])
async def get_cases_by_department(department: str, queries: QueryService = Queries) -> list[IncidentRecord]:
    """List a department's incident records, oldest time first."""
    return await queries.list_by_department(department)


@router.delete("/{record_id}", status_code=status.HTTP_200_OK, response_class=Response)
async def delete_case(record_id: str, queries: QueryService = Queries) -> Response:
    """Delete a record. Succeeds whether or not the id exists."""
    await queries.delete_by_id(record_id)
    return Response(status_code=status.HTTP_200_OK)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=IncidentRecord, openapi_extra=_RECORD_BODY)
async def create_case(request: Request, bridge: IncidentBridgeService = BridgeService) -> IncidentRecord:
    """
    Store a record given as JSON, bypassing extraction.

    The raw body goes straight to the bridge, so malformed JSON and
    non-object bodies fail the same way as invalid fields: 500 with
    ``Failed to parse and save incident record: ...``.
    """
    return await bridge.ingest(await request.body())


__all__ = ["router"]
