"""
Calendar views: per-day event lists and layouts for a visible span.
"""

from datetime import date, datetime, timedelta

from core.config import (
    DEFAULT_DURATION_MINS,
    DEFAULT_EVENT_TITLE,
    START_ROUNDING_MINUTES,
)
from core.validation import to_iso_string
from models.events import CalendarEvent, DayLayout, PendingCalendarEvent
from services.scheduler import EventStore, end_of_day, start_of_day
from services.timeline import layout_day, layout_days


def events_for_date(day: date, events: list[CalendarEvent]) -> list[CalendarEvent]:
    """Return the events starting on a given date."""
    lower = start_of_day(day)
    upper = end_of_day(day)
    return [event for event in events if lower <= event["start_date"] <= upper]


def events_for_dates(days: list[date], events: list[CalendarEvent]) -> list[list[CalendarEvent]]:
    """Return one event list per date, in the order of the dates given."""
    return [events_for_date(day, events) for day in days]


def days_in_span(start: date, end: date) -> list[date]:
    """All dates from start to end inclusive."""
    if isinstance(start, datetime):
        start = start.date()
    if isinstance(end, datetime):
        end = end.date()
    return [start + timedelta(days=n) for n in range((end - start).days + 1)]


def day_layout(store: EventStore, day: date) -> DayLayout:
    """Query one day from the store and lay its events out."""
    events = store.query(day, day)
    return {
        "date": day,
        "events": events,
        "placements": layout_day(events),
    }


def span_layout(store: EventStore, start: date, end: date) -> list[DayLayout]:
    """
    Query a visible span (day or week) once and lay out each day separately.
    """
    days = days_in_span(start, end)
    per_day = events_for_dates(days, store.query(start, end))
    placements = layout_days(zip(days, per_day))
    return [
        {"date": day, "events": events, "placements": placements[day]}
        for day, events in zip(days, per_day)
    ]


def default_start_date(now: datetime | None = None) -> str:
    """
    Default start for a new event: now, rounded up to the next 5-minute
    boundary.
    """
    now = now or datetime.now()
    step = timedelta(minutes=START_ROUNDING_MINUTES)
    remainder = (now - datetime.min) % step
    if remainder:
        now += step - remainder
    return to_iso_string(now)


def new_pending_event(now: datetime | None = None) -> PendingCalendarEvent:
    """Field defaults for the add-event form."""
    return {
        "title": DEFAULT_EVENT_TITLE,
        "attendees": [],
        "start_date": default_start_date(now),
        "duration_mins": DEFAULT_DURATION_MINS,
        "video_type": "none",
    }


def event_count_label(count: int) -> str:
    """Day badge text: the count, with a trailing "+" past nine."""
    return f"{count}+" if count > 9 else str(count)
