"""Record store adapters."""

from .base import IncidentRepository
from .factory import create_repository
from .memory import InMemoryIncidentRepository
from .mongo import MongoIncidentRepository

__all__ = [
    "IncidentRepository",
    "InMemoryIncidentRepository",
    "MongoIncidentRepository",
    "create_repository",
]
