"""
Timeline layout for events on a single day.

Each event gets a vertical position and height in 15-minute slots, plus a
width and left offset so events whose times overlap sit side by side.
"""

import math
from collections.abc import Iterable, Sequence
from datetime import date

from core.config import SLOT_MINUTES, SLOTS_PER_DAY
from core.errors import InvalidEventError
from core.validation import parse_start_date
from models.events import CalendarEvent, Placement, SiblingContext


def compute_slot_position(start_date: str) -> float:
    """Slots elapsed since midnight; seconds are ignored."""
    start = parse_start_date(start_date)
    return (start.hour * 60 + start.minute) / SLOT_MINUTES


def compute_slot_height(duration_mins: int) -> float:
    if duration_mins <= 0:
        raise InvalidEventError(f"Invalid duration_mins {duration_mins}: must be positive")
    return duration_mins / SLOT_MINUTES


def occupied_slots(slot_position: float, slot_height: float) -> range:
    """
    Slot indices an event covers, starting with the slot containing its start.

    Slots past the end of the day are dropped.
    """
    first = math.floor(slot_position)
    return range(first, min(first + math.ceil(slot_height), SLOTS_PER_DAY))


def build_placement_grid(events: Iterable[CalendarEvent]) -> list[list[str]]:
    """One ordered list of event ids per slot of the day."""
    grid: list[list[str]] = [[] for _ in range(SLOTS_PER_DAY)]
    for event in events:
        position = compute_slot_position(event["start_date"])
        height = compute_slot_height(event["duration_mins"])
        for slot in occupied_slots(position, height):
            grid[slot].append(event["id"])
    return grid


def get_siblings_context(event_id: str, grid: Sequence[Sequence[str]]) -> SiblingContext:
    """
    Find the slot where the event shares space with the most events.

    Ties go to the earliest slot. For a grid

        [a, b, c]
        [d, a, b, c]

    event c has max_position_index 3.
    """
    max_sibling_ids: list[str] = []
    max_position_index = 0

    for slot_ids in grid:
        if event_id not in slot_ids:
            continue
        if len(slot_ids) > len(max_sibling_ids):
            max_sibling_ids = list(slot_ids)
            max_position_index = slot_ids.index(event_id)

    return {
        "max_sibling_ids": max_sibling_ids,
        "max_position_index": max_position_index,
    }


def _horizontal_placement(
    context: SiblingContext, offsets: dict[str, float]
) -> tuple[float, float]:
    sibling_ids = context["max_sibling_ids"]
    position_index = context["max_position_index"]
    num_siblings = len(sibling_ids)

    if num_siblings <= 1:
        return 100.0, 0.0

    width = 100 / num_siblings
    if position_index == 0:
        return width, 0.0

    # Overlapping columns are compressed toward the left, then nudged right
    # when they land on a sibling's offset.
    left = width * position_index - (width / 2) * position_index
    for sibling_id in sibling_ids:
        if offsets.get(sibling_id) == left:
            left += width / 2
    return width, left


def layout_day(events: Sequence[CalendarEvent]) -> dict[str, Placement]:
    """
    Compute a placement for every event of one day, keyed by event id.

    Events are sized in input order; the left-offset nudge only sees
    siblings placed earlier. This is a greedy heuristic and with three or
    more mutually overlapping events offsets may still coincide.
    """
    grid = build_placement_grid(events)
    offsets: dict[str, float] = {}
    placements: dict[str, Placement] = {}

    for event in events:
        event_id = event["id"]
        width, left = _horizontal_placement(get_siblings_context(event_id, grid), offsets)
        offsets[event_id] = left
        placements[event_id] = {
            "slot_position": compute_slot_position(event["start_date"]),
            "slot_height": compute_slot_height(event["duration_mins"]),
            "width_percent": width,
            "left_offset_percent": left,
        }

    return placements


def layout_days(
    events_by_day: Iterable[tuple[date, Sequence[CalendarEvent]]],
) -> dict[date, dict[str, Placement]]:
    """Independent layouts for several days (e.g. a week view)."""
    return {day: layout_day(events) for day, events in events_by_day}


def format_time_label(start_date: str) -> str:
    """12-hour clock label for an event start, e.g. '9:05AM'."""
    start = parse_start_date(start_date)
    hours = start.hour % 12 or 12
    suffix = "PM" if start.hour >= 12 else "AM"
    return f"{hours}:{start.minute:02d}{suffix}"
