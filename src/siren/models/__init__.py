from .schemas import RECORD_FIELDS, TIME_FORMAT, AudioTextRequest, Department, HealthStatus, IncidentRecord

__all__ = [
    "RECORD_FIELDS",
    "TIME_FORMAT",
    "AudioTextRequest",
    "Department",
    "HealthStatus",
    "IncidentRecord",
]
