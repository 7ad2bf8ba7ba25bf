"""Tests for event field validation."""

from datetime import datetime

import pytest

from core.errors import InvalidEventError
from core.validation import (
    normalize_start_date,
    validate_attendees,
    validate_duration,
    validate_pending_event,
    validate_updates,
    validate_video_type,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2025-11-03T09:15", "2025-11-03T09:15:00.000"),
        ("2025-11-03T09:15:30", "2025-11-03T09:15:30.000"),
        ("2025-11-03T09:15:30.250", "2025-11-03T09:15:30.250"),
        ("2025-11-03T09:15:30.123456", "2025-11-03T09:15:30.123"),
        ("2025-11-03", "2025-11-03T00:00:00.000"),
        (datetime(2025, 11, 3, 9, 15), "2025-11-03T09:15:00.000"),
    ],
)
def test_normalize_start_date(value, expected):
    assert normalize_start_date(value) == expected


@pytest.mark.parametrize(
    "value",
    ["", "tomorrow", "2025-13-01T09:00", "2025-11-03T09:00:00Z", "2025-11-03T09:00+02:00", 1730624400, None],
)
def test_normalize_start_date_rejects(value):
    with pytest.raises(InvalidEventError):
        normalize_start_date(value)


@pytest.mark.parametrize("value", [0, -30, 1.5, "45", True, None])
def test_validate_duration_rejects(value):
    with pytest.raises(InvalidEventError):
        validate_duration(value)


def test_validate_video_type():
    assert validate_video_type(None) == "none"
    assert validate_video_type("meet") == "meet"
    with pytest.raises(InvalidEventError):
        validate_video_type("teams")


def test_validate_attendees_keeps_duplicates():
    assert validate_attendees(("Ana", "Ana")) == ["Ana", "Ana"]
    with pytest.raises(InvalidEventError):
        validate_attendees("Ana")
    with pytest.raises(InvalidEventError):
        validate_attendees(["Ana", 3])


@pytest.mark.parametrize("attendees", [[""], ["Ana", "  "]])
def test_validate_attendees_rejects_blank_names(attendees):
    with pytest.raises(InvalidEventError, match="name is empty"):
        validate_attendees(attendees)


def test_validate_pending_event_reports_all_errors(sample_pending_event):
    pending = {**sample_pending_event, "duration_mins": 0, "colour": "red"}
    del pending["title"]

    with pytest.raises(InvalidEventError) as excinfo:
        validate_pending_event(pending)

    message = str(excinfo.value)
    assert "Missing event fields: title" in message
    assert "duration_mins" in message
    assert "Unknown event field 'colour'" in message


def test_validate_pending_event_rejects_id(sample_pending_event):
    with pytest.raises(InvalidEventError, match="id"):
        validate_pending_event({**sample_pending_event, "id": "chosen"})


def test_validate_updates_partial():
    assert validate_updates({"start_date": "2025-11-03T10:00", "video_type": None}) == {
        "start_date": "2025-11-03T10:00:00.000",
        "video_type": "none",
    }
    assert validate_updates({}) == {}
