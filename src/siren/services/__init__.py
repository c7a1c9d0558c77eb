"""
Services module.

Provides the oracle client, the normalization pipeline, the persistence
bridge and the query service.
"""

from .bridge import IncidentBridgeService
from .extraction import IncidentExtractionService, build_extraction_prompt, strip_code_fences
from .oracle_client import GeminiClient, OracleConfig
from .query import QueryService

__all__ = [
    "GeminiClient",
    "OracleConfig",
    "IncidentBridgeService",
    "IncidentExtractionService",
    "QueryService",
    "build_extraction_prompt",
    "strip_code_fences",
]
