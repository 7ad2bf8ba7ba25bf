"""Tests for the SQLite key-value backend."""

import sqlite3

import pytest

from core.database import SQLiteKeyValueStore, get_connection
from core.errors import PersistenceError
from services.scheduler import EventStore


def test_get_missing_key(db_path):
    assert SQLiteKeyValueStore().get("calendarEvents") is None


def test_set_overwrites(db_path):
    backend = SQLiteKeyValueStore()
    backend.set("calendarEvents", "[]")
    backend.set("calendarEvents", '[{"id": "a"}]')

    assert backend.get("calendarEvents") == '[{"id": "a"}]'

    conn = get_connection(db_path)
    try:
        rows = conn.execute("SELECT COUNT(*) FROM kv_store").fetchone()
    finally:
        conn.close()
    assert rows == (1,)


def test_store_survives_restart(tmp_path, sample_pending_event):
    path = tmp_path / "nested" / "calendar.db"
    event = EventStore(SQLiteKeyValueStore(path)).create(sample_pending_event)

    assert EventStore(SQLiteKeyValueStore(path)).events == [event]


def test_read_failure_is_persistence_error(db_path):
    backend = SQLiteKeyValueStore()
    conn = sqlite3.connect(db_path)
    conn.execute("DROP TABLE kv_store")
    conn.commit()
    conn.close()

    with pytest.raises(PersistenceError):
        backend.get("calendarEvents")
    with pytest.raises(PersistenceError):
        backend.set("calendarEvents", "[]")
