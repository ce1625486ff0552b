"""
Pydantic schemas
API request/response shapes that are not entity records

Create/edit bodies are raw form payloads (Dict[str, Any]) checked by the
form validator, so a rejected field is reported by name.
"""
from datetime import datetime
from typing import Any, Optional, List, Dict, Union
from pydantic import BaseModel, Field

from propdash.models.records import ChemistryReading


# ============== Status ==============

class StatusUpdate(BaseModel):
    status: str = Field(..., description="Target status, one of the kind's statuses")


class DeleteResponse(BaseModel):
    id: Union[int, str]
    deleted: bool


# ============== Errors ==============

class FieldErrorDetail(BaseModel):
    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    detail: FieldErrorDetail


# ============== Aggregates ==============

class OccupancySummary(BaseModel):
    count: int
    total: int


class KindSummary(BaseModel):
    kind: str
    total: int
    by_status: Dict[str, int]
    breakdowns: Dict[str, Dict[str, int]] = Field(default_factory=dict)
    occupancy: Optional[OccupancySummary] = None


# ============== Pool chemistry ==============

class ChemistryAssessment(BaseModel):
    """Per-measure verdict: "ok" or "out_of_range" """
    ph: str
    chlorine: str
    alkalinity: str
    in_range: bool


class ChemistryReadingResponse(BaseModel):
    reading: ChemistryReading
    assessment: ChemistryAssessment


# ============== Notifications ==============

class NotificationResponse(BaseModel):
    event_id: str
    event_type: str
    timestamp: datetime
    title: str
    description: str
    variant: str
    kind: Optional[str] = None
    entity_id: Optional[Union[int, str]] = None
    extra: Dict[str, Any] = Field(default_factory=dict)


class NotificationListResponse(BaseModel):
    items: List[NotificationResponse]
    total_published: int


class HealthResponse(BaseModel):
    status: str
    stores: Dict[str, int] = Field(default_factory=dict)


__all__ = [
    "StatusUpdate",
    "DeleteResponse",
    "FieldErrorDetail",
    "ValidationErrorResponse",
    "OccupancySummary",
    "KindSummary",
    "ChemistryAssessment",
    "ChemistryReadingResponse",
    "NotificationResponse",
    "NotificationListResponse",
    "HealthResponse",
]
