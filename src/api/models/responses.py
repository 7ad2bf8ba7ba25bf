"""Pydantic response models for API endpoints."""

import datetime

from pydantic import BaseModel

from models.events import VideoType


class HealthResponse(BaseModel):
    """Health check response."""

    status: str  # "healthy" or "unhealthy"
    version: str
    storage_available: bool
    event_count: int
    timestamp: str  # ISO 8601 UTC
    error: str | None = None


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: str
    details: list[str] = []


class ErrorCodes:
    """Error code constants."""

    INVALID_REQUEST = "INVALID_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class EventResponse(BaseModel):
    """A stored calendar event."""

    id: str
    title: str
    attendees: list[str]
    start_date: str
    duration_mins: int
    video_type: VideoType


class PlacementResponse(BaseModel):
    """Timeline position of an event, in slots and percentages."""

    slot_position: float
    slot_height: float
    width_percent: float
    left_offset_percent: float


class TimelineEventResponse(EventResponse):
    """Event with its placement on the day timeline."""

    time_label: str  # e.g. "9:05AM"
    placement: PlacementResponse


class DayLayoutResponse(BaseModel):
    """All events of one day, laid out."""

    date: datetime.date
    event_count: int
    event_count_label: str
    events: list[TimelineEventResponse]
