"""Pydantic models for incident records and request/response schemas."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

TIME_FORMAT = "%Y-%m-%d %H:%M"

RECORD_FIELDS: tuple[str, ...] = ("name", "department", "time", "priority", "location", "summary", "status")


class Department(str, Enum):
    """Departments an incident can be routed to."""

    FIRE = "fire"
    POLICE = "police"
    HOSPITAL = "hospital"
    AMBULANCE = "ambulance"
    IT = "IT"
    FOREST = "forest"
    UNKNOWN = "unknown"

    @classmethod
    def routable(cls) -> list["Department"]:
        """Departments the oracle is allowed to pick."""
        return [member for member in cls if member is not cls.UNKNOWN]

    @classmethod
    def parse(cls, value: str | None) -> "Department":
        """Map a stored department string onto the enum, falling back to UNKNOWN."""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


class IncidentRecord(BaseModel):
    """A normalized emergency report as kept in the record store."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str | None = Field(None, description="Identifier assigned by the store")
    name: str | None = Field(None, description="Reporter or subject name")
    department: str | None = Field(
        None,
        description="Department the incident belongs to",
        examples=["fire", "police", "hospital", "ambulance", "IT", "forest"],
    )
    time: str | None = Field(None, description="Incident timestamp", examples=["2025-09-15 12:20"])
    priority: str | None = Field(None, description="Severity label", examples=["high"])
    location: str | None = Field(None, description="Free-text location", examples=["Building B"])
    summary: str | None = Field(None, description="Incident description")
    status: str | None = Field(None, description="State label", examples=["OPEN", "Unknown"])

    def to_document(self) -> dict[str, str | None]:
        """Return the record fields without the id, ready for storage."""
        return self.model_dump(exclude={"id"})


class AudioTextRequest(BaseModel):
    """Body of the text intake endpoint."""

    text: str | None = Field(
        None,
        description="Transcribed emergency report",
        examples=["There is a fire in Building B and two cars are burning."],
    )


class HealthStatus(BaseModel):
    """Health check response model."""

    status: str = Field(..., description="Overall service status")
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Deployment environment")
    uptime_seconds: float = Field(..., ge=0.0)
    components: dict[str, str] = Field(default_factory=dict, description="Status of each dependency")
