"""Factory for creating the record store configured for this process."""

from ..config import Settings, get_logger
from .base import IncidentRepository
from .memory import InMemoryIncidentRepository
from .mongo import MongoIncidentRepository

logger = get_logger("repository.factory")


def create_repository(settings: Settings) -> IncidentRepository:
    """Create an incident repository based on configuration.

    Args:
        settings: Application settings

    Returns:
        The configured repository
    """
    if settings.storage_backend == "memory":
        logger.info("Using in-memory incident repository")
        return InMemoryIncidentRepository()

    logger.info(
        "Using MongoDB incident repository",
        database=settings.mongodb_database,
        collection=settings.mongodb_collection,
    )
    return MongoIncidentRepository.from_uri(
        settings.mongodb_uri,
        settings.mongodb_database,
        settings.mongodb_collection,
        timeout_ms=settings.mongodb_timeout_ms,
    )
