"""API Pydantic models."""

from .requests import EventCreateRequest, EventUpdateRequest
from .responses import (
    DayLayoutResponse,
    ErrorCodes,
    ErrorResponse,
    EventResponse,
    HealthResponse,
    PlacementResponse,
    TimelineEventResponse,
)

__all__ = [
    "HealthResponse",
    "ErrorResponse",
    "ErrorCodes",
    "EventResponse",
    "PlacementResponse",
    "TimelineEventResponse",
    "DayLayoutResponse",
    "EventCreateRequest",
    "EventUpdateRequest",
]
