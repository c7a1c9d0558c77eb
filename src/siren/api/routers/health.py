"""
Health Check Router

Reports whether the record store answers and whether the oracle has
credentials. Suitable for load balancers and container probes.
"""

import time

from fastapi import APIRouter, Request

from ...config import Settings, get_logger
from ...models import HealthStatus
from ...repositories import IncidentRepository
from ...services import GeminiClient
from ..dependencies import OracleClient, Repository

router = APIRouter(tags=["health"])
logger = get_logger(__name__)

# Track application startup time for uptime calculation
app_startup_time = time.time()


@router.get("/health/", response_model=HealthStatus)
async def basic_health_check(
    request: Request,
    repository: IncidentRepository = Repository,
    oracle_client: GeminiClient = OracleClient,
) -> HealthStatus:
    """Basic health check endpoint."""
    settings: Settings = request.app.state.settings
    components = {
        "database": "healthy" if await repository.health_check() else "unhealthy",
        "oracle": "configured" if await oracle_client.health_check() else "missing_api_key",
    }
    service_status = "healthy" if components["database"] == "healthy" else "degraded"

    if service_status != "healthy":
        logger.warning("Health check degraded", components=components)

    return HealthStatus(
        status=service_status,
        version=settings.app_version,
        environment=settings.environment,
        uptime_seconds=time.time() - app_startup_time,
        components=components,
    )


__all__ = ["router"]
