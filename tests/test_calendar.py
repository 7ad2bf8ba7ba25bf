"""Tests for calendar view helpers."""

from datetime import date, datetime

from services.calendar import (
    day_layout,
    days_in_span,
    default_start_date,
    events_for_date,
    event_count_label,
    events_for_dates,
    new_pending_event,
    span_layout,
)


def test_default_start_rounds_up_to_five_minutes():
    assert default_start_date(datetime(2025, 11, 3, 9, 1, 30)) == "2025-11-03T09:05:00.000"
    assert default_start_date(datetime(2025, 11, 3, 23, 58)) == "2025-11-04T00:00:00.000"


def test_default_start_keeps_exact_boundary():
    assert default_start_date(datetime(2025, 11, 3, 9, 10)) == "2025-11-03T09:10:00.000"


def test_new_pending_event_defaults():
    assert new_pending_event(datetime(2025, 11, 3, 9, 7)) == {
        "title": "My New Event",
        "attendees": [],
        "start_date": "2025-11-03T09:10:00.000",
        "duration_mins": 60,
        "video_type": "none",
    }


def test_days_in_span():
    assert days_in_span(date(2025, 11, 2), datetime(2025, 11, 4, 12, 0)) == [
        date(2025, 11, 2),
        date(2025, 11, 3),
        date(2025, 11, 4),
    ]


def test_events_for_dates_splits_by_day(make_event):
    events = [
        make_event("a", "2025-11-03T00:00:00.000"),
        make_event("b", "2025-11-03T23:59:59.000"),
        make_event("c", "2025-11-04T08:00:00.000"),
    ]

    per_day = events_for_dates([date(2025, 11, 3), date(2025, 11, 5), date(2025, 11, 4)], events)

    assert [[event["id"] for event in day] for day in per_day] == [["a", "b"], [], ["c"]]
    assert events_for_date(date(2025, 11, 2), events) == []


def test_day_layout(store, sample_pending_event):
    a = store.create({**sample_pending_event, "start_date": "2025-11-03T09:00"})
    b = store.create({**sample_pending_event, "start_date": "2025-11-03T09:30"})
    store.create({**sample_pending_event, "start_date": "2025-11-04T09:30"})

    layout = day_layout(store, date(2025, 11, 3))

    assert layout["date"] == date(2025, 11, 3)
    assert [event["id"] for event in layout["events"]] == [a["id"], b["id"]]
    assert layout["placements"][a["id"]]["width_percent"] == 50
    assert layout["placements"][b["id"]]["width_percent"] == 50


def test_span_layout_lays_out_days_independently(store, sample_pending_event):
    monday = store.create({**sample_pending_event, "start_date": "2025-11-03T09:00"})
    tuesday = store.create({**sample_pending_event, "start_date": "2025-11-04T09:00"})

    layouts = span_layout(store, date(2025, 11, 2), date(2025, 11, 8))

    assert [layout["date"] for layout in layouts] == days_in_span(date(2025, 11, 2), date(2025, 11, 8))
    assert layouts[0]["events"] == []
    assert layouts[1]["placements"][monday["id"]]["width_percent"] == 100
    assert layouts[2]["placements"][tuesday["id"]]["width_percent"] == 100


def test_event_count_label():
    assert event_count_label(0) == "0"
    assert event_count_label(9) == "9"
    assert event_count_label(12) == "12+"
