"""
Event store: the canonical, time-sorted collection of calendar events.
"""

import bisect
import json
import logging
import uuid
from collections.abc import Callable, Mapping
from datetime import date, datetime, time

from core.config import STORE_KEY
from core.database import KeyValueStore
from core.errors import InvalidEventError, PersistenceError
from core.validation import to_iso_string, validate_pending_event, validate_updates
from models.events import CalendarEvent, PendingCalendarEvent

logger = logging.getLogger(__name__)


def new_event_id() -> str:
    """Generate an opaque unique event id."""
    return uuid.uuid4().hex


def _as_date(bound: date) -> date:
    return bound.date() if isinstance(bound, datetime) else bound


def start_of_day(bound: date) -> str:
    """Stored-form timestamp for 00:00:00 on the bound's day."""
    return to_iso_string(datetime.combine(_as_date(bound), time(0, 0, 0)))


def end_of_day(bound: date) -> str:
    """Stored-form timestamp for 23:59:59 on the bound's day."""
    return to_iso_string(datetime.combine(_as_date(bound), time(23, 59, 59)))


def _start_key(event: Mapping) -> str:
    return event["start_date"]


def _copy_event(event: CalendarEvent) -> CalendarEvent:
    return {**event, "attendees": list(event["attendees"])}


def _insert_sorted(events: list[CalendarEvent], event: CalendarEvent) -> None:
    """Insert before the first event starting strictly later, else append."""
    index = bisect.bisect_right(events, event["start_date"], key=_start_key)
    events.insert(index, event)


class EventStore:
    """
    Owns the sorted event collection and persists it on every mutation.

    The whole collection is serialized as a JSON array under a single key of
    the injected backend. A new collection replaces the in-memory one only
    after the backend write succeeds.
    """

    def __init__(
        self,
        backend: KeyValueStore,
        key: str = STORE_KEY,
        id_factory: Callable[[], str] = new_event_id,
    ):
        self.backend = backend
        self.key = key
        self.id_factory = id_factory
        self._events: list[CalendarEvent] = self._load()

    def _load(self) -> list[CalendarEvent]:
        blob = self.backend.get(self.key)
        if blob is None:
            return []

        try:
            records = json.loads(blob)
        except json.JSONDecodeError as e:
            raise PersistenceError(f"Stored collection '{self.key}' is not valid JSON: {e}") from e
        if not isinstance(records, list):
            raise PersistenceError(f"Stored collection '{self.key}' is not a JSON array")

        events = []
        seen_ids: set[str] = set()
        for record in records:
            if not isinstance(record, dict) or not isinstance(record.get("id"), str):
                raise PersistenceError(f"Stored event without a valid id: {record!r}")
            if record["id"] in seen_ids:
                raise PersistenceError(f"Stored collection repeats event id {record['id']}")
            seen_ids.add(record["id"])
            fields = {name: value for name, value in record.items() if name != "id"}
            try:
                cleaned = validate_pending_event(fields)
            except InvalidEventError as e:
                raise PersistenceError(f"Stored event {record['id']} is invalid: {e}") from e
            events.append({"id": record["id"], **cleaned})

        # Stable sort keeps the stored order of events with equal start dates
        events.sort(key=_start_key)
        logger.info("Loaded %d events from '%s'", len(events), self.key)
        return events

    def _commit(self, events: list[CalendarEvent]) -> None:
        blob = json.dumps(events)
        try:
            self.backend.set(self.key, blob)
        except PersistenceError:
            logger.error("Failed to persist %d events to '%s'", len(events), self.key)
            raise
        self._events = events

    def _index_of(self, event_id: str) -> int:
        for index, event in enumerate(self._events):
            if event["id"] == event_id:
                return index
        return -1

    @property
    def events(self) -> list[CalendarEvent]:
        """Snapshot of the full collection in start order."""
        return [_copy_event(event) for event in self._events]

    def __len__(self) -> int:
        return len(self._events)

    def get(self, event_id: str) -> CalendarEvent | None:
        index = self._index_of(event_id)
        if index == -1:
            return None
        return _copy_event(self._events[index])

    def create(self, pending: PendingCalendarEvent) -> CalendarEvent:
        """Assign an id to a pending event and insert it in start order."""
        cleaned = validate_pending_event(pending)
        event: CalendarEvent = {"id": self.id_factory(), **cleaned}

        updated = list(self._events)
        _insert_sorted(updated, event)
        self._commit(updated)
        return _copy_event(event)

    def update(self, event_id: str, updates: Mapping) -> None:
        """
        Shallow-merge updates into an event and move it to its sorted slot.

        Unknown ids are ignored. A supplied field replaces the old value
        entirely (attendees included).
        """
        cleaned = validate_updates(updates)
        index = self._index_of(event_id)
        if index == -1:
            return

        merged: CalendarEvent = {**self._events[index], **cleaned}
        updated = self._events[:index] + self._events[index + 1:]
        _insert_sorted(updated, merged)
        self._commit(updated)

    def delete(self, event_id: str) -> None:
        """Remove an event; unknown ids are ignored."""
        index = self._index_of(event_id)
        if index == -1:
            return
        self._commit(self._events[:index] + self._events[index + 1:])

    def query(self, start_bound: date, end_bound: date) -> list[CalendarEvent]:
        """
        Events starting between 00:00:00 on start_bound and 23:59:59 on
        end_bound, inclusive, in start order.
        """
        lower = start_of_day(start_bound)
        upper = end_of_day(end_bound)
        lo = bisect.bisect_left(self._events, lower, key=_start_key)
        hi = bisect.bisect_right(self._events, upper, key=_start_key)
        return [_copy_event(event) for event in self._events[lo:hi]]
