"""
Event field validation at the store boundary.
"""

from collections.abc import Mapping
from datetime import datetime

from core.config import VIDEO_TYPES
from core.errors import InvalidEventError

EVENT_FIELDS = ("title", "attendees", "start_date", "duration_mins", "video_type")


def to_iso_string(value: datetime) -> str:
    """Format a naive local datetime in the fixed-width stored form."""
    return value.isoformat(timespec="milliseconds")


def parse_start_date(value: str) -> datetime:
    """Parse a stored start_date back into a naive local datetime."""
    return datetime.fromisoformat(value)


def normalize_start_date(value) -> str:
    """
    Validate a local-time ISO-8601 start date and return its canonical form.

    Canonical form is YYYY-MM-DDTHH:MM:SS.mmm, which sorts lexicographically
    in chronological order. Values carrying a UTC offset are rejected.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            raise InvalidEventError(f"Invalid start_date '{value}': expected ISO-8601")
    else:
        raise InvalidEventError(f"Invalid start_date {value!r}: expected ISO-8601 string")

    if parsed.tzinfo is not None:
        raise InvalidEventError(
            f"Invalid start_date '{value}': must be local time without a UTC offset"
        )
    return to_iso_string(parsed)


def validate_duration(value) -> int:
    """Durations are whole, positive minutes."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidEventError(f"Invalid duration_mins {value!r}: expected an integer")
    if value <= 0:
        raise InvalidEventError(f"Invalid duration_mins {value}: must be positive")
    return value


def validate_video_type(value) -> str:
    """Accept one of VIDEO_TYPES; None means no video call."""
    if value is None:
        return "none"
    if value not in VIDEO_TYPES:
        allowed = ", ".join(VIDEO_TYPES)
        raise InvalidEventError(f"Invalid video_type {value!r}: expected one of {allowed}")
    return value


def validate_attendees(value) -> list[str]:
    if not isinstance(value, (list, tuple)):
        raise InvalidEventError(f"Invalid attendees {value!r}: expected a list of names")
    for attendee in value:
        if not isinstance(attendee, str):
            raise InvalidEventError(f"Invalid attendee {attendee!r}: expected a string")
        if not attendee.strip():
            raise InvalidEventError(f"Invalid attendee {attendee!r}: name is empty")
    return list(value)


def validate_title(value) -> str:
    if not isinstance(value, str):
        raise InvalidEventError(f"Invalid title {value!r}: expected a string")
    return value


VALIDATORS = {
    "title": validate_title,
    "attendees": validate_attendees,
    "start_date": normalize_start_date,
    "duration_mins": validate_duration,
    "video_type": validate_video_type,
}


def _validate_fields(fields: Mapping) -> tuple[dict, list[str]]:
    cleaned = {}
    errors = []
    for name, value in fields.items():
        if name == "id":
            errors.append("Event id cannot be set or changed")
            continue
        validator = VALIDATORS.get(name)
        if validator is None:
            errors.append(f"Unknown event field '{name}'")
            continue
        try:
            cleaned[name] = validator(value)
        except InvalidEventError as e:
            errors.append(str(e))
    return cleaned, errors


def validate_pending_event(pending: Mapping) -> dict:
    """
    Validate a complete pending event and return a normalized copy.

    Checks:
    1. All event fields are present
    2. No id or unknown fields are supplied
    3. Each field passes its validator
    """
    missing = [name for name in EVENT_FIELDS if name not in pending]
    cleaned, errors = _validate_fields(pending)
    if missing:
        errors.insert(0, f"Missing event fields: {', '.join(missing)}")
    if errors:
        raise InvalidEventError("; ".join(errors))
    return cleaned


def validate_updates(updates: Mapping) -> dict:
    """Validate a partial update; every supplied field must be valid."""
    cleaned, errors = _validate_fields(updates)
    if errors:
        raise InvalidEventError("; ".join(errors))
    return cleaned
