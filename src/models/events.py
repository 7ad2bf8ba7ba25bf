"""
Data models for calendar events and their timeline placements.

Using TypedDict for event dictionaries so records serialize to JSON as-is.
"""

from datetime import date
from typing import Literal, TypedDict

VideoType = Literal["none", "zoom", "meet"]


class PendingCalendarEvent(TypedDict):
    """Event fields supplied when requesting creation (no id yet)."""
    title: str
    attendees: list[str]
    start_date: str  # Local-time ISO-8601, e.g. 2025-11-03T09:15:00.000
    duration_mins: int
    video_type: VideoType


class CalendarEvent(PendingCalendarEvent):
    """Stored calendar event."""
    id: str


class Placement(TypedDict):
    """Where an event sits on the day timeline."""
    slot_position: float
    slot_height: float
    width_percent: float
    left_offset_percent: float


class SiblingContext(TypedDict):
    """The busiest slot an event occupies and its index in that slot."""
    max_sibling_ids: list[str]
    max_position_index: int


class DayLayout(TypedDict):
    """Events for one day with their computed placements."""
    date: date
    events: list[CalendarEvent]
    placements: dict[str, Placement]
