"""
Pydantic models for safety incidents.
These models handle validation for report submission and responses.

JSON field names are camelCase (the map frontend reads `locationSource`,
`createdAt`, ...); Python attributes stay snake_case.
"""

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class Category(str, Enum):
    """Safety category assigned by the classifier."""
    HARASSMENT = "Harassment"
    ASSAULT = "Assault"
    LIGHTING_ISSUE = "Lighting Issue"
    SUSPICIOUS_BEHAVIOR = "Suspicious Behavior"
    OTHER = "Other"


class LocationSource(str, Enum):
    """Which resolution stage produced the incident coordinate."""
    COORDINATES = "coordinates"
    GAZETTEER = "gazetteer"
    GEOCODED = "geocoded"
    DEFAULT = "default"


class IncidentSource(str, Enum):
    """Channel the report arrived through."""
    MANUAL = "Manual"
    SMS = "SMS"
    VOICE = "Voice"


class TimePeriod(str, Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


class Incident(CamelModel):
    """
    An enriched incident as stored and returned by the API.
    Category and coordinates are always set by the enrichment pipeline.
    """
    id: str = Field(..., description="Generated identifier")
    description: str
    category: Category
    latitude: float
    longitude: float
    location_source: Optional[LocationSource] = Field(None, description="Provenance of the coordinate")
    location_name: Optional[str] = Field(None, description="Display name for gazetteer/geocoded locations")
    timestamp: datetime = Field(..., description="When the incident happened (supplied or defaulted)")
    created_at: datetime = Field(..., description="When the incident was recorded")
    source: IncidentSource = IncidentSource.MANUAL
    reporter_phone: Optional[str] = Field(None, description="SMS sender number")

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": "3f2c9a7e0b8d4c51a6e2f0d9b1c47a85",
                "description": "Someone is following me near the library",
                "category": "Harassment",
                "latitude": 40.504649,
                "longitude": -74.452597,
                "locationSource": "gazetteer",
                "locationName": "Library",
                "timestamp": "2025-03-02T21:15:00Z",
                "createdAt": "2025-03-02T21:15:04Z",
                "source": "Manual",
            }
        }


class IncidentCreate(CamelModel):
    """
    Manual report (incoming POST /api/incidents).
    Coordinates are optional; when omitted the location is resolved from the text.
    """
    description: str = Field(..., max_length=2000, description="What happened")
    latitude: Optional[float] = Field(None, description="Checked with longitude by the enrichment service")
    longitude: Optional[float] = None
    timestamp: Optional[datetime] = None


class VoiceReportCreate(CamelModel):
    """Voice transcript report. The voice channel always sends the device position."""
    transcription: Optional[str] = Field(None, max_length=2000)
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class IncidentStats(CamelModel):
    """Aggregates served by GET /api/stats."""
    total: int
    by_category: Dict[str, int]
    by_time_period: Dict[str, int]
    by_category_and_time: Dict[str, int]
    recent: List[Incident]
