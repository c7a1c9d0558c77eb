"""
FastAPI dependencies module.

The oracle client and the repository are created once in the application
lifespan and kept on ``app.state``; services are cheap, stateless wrappers
built per request around them.
"""

from fastapi import Depends, Request

from ..repositories import IncidentRepository
from ..services import GeminiClient, IncidentBridgeService, IncidentExtractionService, QueryService


def get_repository(request: Request) -> IncidentRepository:
    """Dependency returning the process-wide incident repository."""
    return request.app.state.repository


def get_oracle_client(request: Request) -> GeminiClient:
    """Dependency returning the process-wide oracle client."""
    return request.app.state.oracle_client


def get_bridge_service(repository: IncidentRepository = Depends(get_repository)) -> IncidentBridgeService:
    return IncidentBridgeService(repository)


def get_extraction_service(
    oracle_client: GeminiClient = Depends(get_oracle_client),
    bridge: IncidentBridgeService = Depends(get_bridge_service),
) -> IncidentExtractionService:
    return IncidentExtractionService(oracle_client, bridge)


def get_query_service(repository: IncidentRepository = Depends(get_repository)) -> QueryService:
    return QueryService(repository)


# Convenience dependency combinations
Repository = Depends(get_repository)
OracleClient = Depends(get_oracle_client)
BridgeService = Depends(get_bridge_service)
ExtractionService = Depends(get_extraction_service)
Queries = Depends(get_query_service)
