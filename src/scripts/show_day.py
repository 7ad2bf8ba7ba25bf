#!/usr/bin/env python3
"""
Print the events of a day (or span of days) with their timeline placements.

Usage:
    uv run python src/scripts/show_day.py 2025-11-03
    uv run python src/scripts/show_day.py 2025-11-02 --end 2025-11-08
"""

import argparse
import sys
from datetime import date
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.database import SQLiteKeyValueStore
from core.errors import PersistenceError
from services.calendar import span_layout
from services.scheduler import EventStore
from services.timeline import format_time_label


def print_layouts(layouts) -> None:
    for layout in layouts:
        events = layout["events"]
        print(f"\n{layout['date']:%A %Y-%m-%d} ({len(events)} events)")
        for event in events:
            placement = layout["placements"][event["id"]]
            print(
                f"  {format_time_label(event['start_date']):>7}  "
                f"{event['duration_mins']:>4} min  "
                f"slot {placement['slot_position']:g}+{placement['slot_height']:g}  "
                f"width {placement['width_percent']:.1f}%  "
                f"left {placement['left_offset_percent']:.1f}%  "
                f"{event['title']}"
            )


def main():
    parser = argparse.ArgumentParser(
        description="Show calendar events and their timeline layout"
    )
    parser.add_argument("day", type=date.fromisoformat, help="Day to show (YYYY-MM-DD)")
    parser.add_argument(
        "--end",
        type=date.fromisoformat,
        help="Last day of the span to show (defaults to DAY)",
    )

    args = parser.parse_args()

    try:
        store = EventStore(SQLiteKeyValueStore())
        print_layouts(span_layout(store, args.day, args.end or args.day))
    except PersistenceError as e:
        print(f"\nError: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
