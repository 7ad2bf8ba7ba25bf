"""
Pytest configuration and shared fixtures.
"""

import itertools
import sys
from pathlib import Path

import pytest

# Add src and the fixture generators to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent / "fixtures"))

from core.database import MemoryKeyValueStore  # noqa: E402
from generate_events import generate_pending_events  # noqa: E402
from services.scheduler import EventStore  # noqa: E402


@pytest.fixture
def sample_pending_event():
    """Sample pending event dictionary for testing."""
    return {
        "title": "Design review",
        "attendees": ["Ana", "Ben"],
        "start_date": "2025-11-03T09:00:00.000",
        "duration_mins": 60,
        "video_type": "zoom",
    }


@pytest.fixture
def backend():
    return MemoryKeyValueStore()


@pytest.fixture
def store(backend):
    """Event store over an in-memory backend with predictable ids."""
    counter = itertools.count(1)
    return EventStore(backend, id_factory=lambda: f"evt-{next(counter)}")


@pytest.fixture
def make_event():
    """Build a stored-shape event for layout tests."""

    def _make(event_id: str, start_date: str, duration_mins: int = 60, **fields):
        return {
            "id": event_id,
            "title": fields.get("title", event_id),
            "attendees": fields.get("attendees", []),
            "start_date": start_date,
            "duration_mins": duration_mins,
            "video_type": fields.get("video_type", "none"),
        }

    return _make


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    """Point the application database at a temporary file."""
    import core.database

    path = tmp_path / "calendar.db"
    monkeypatch.setattr(core.database, "DB_PATH", path)
    return path


@pytest.fixture
def random_pending_events():
    """Faker-backed generator of reproducible pending events."""
    return generate_pending_events
