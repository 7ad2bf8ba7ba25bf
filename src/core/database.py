"""
SQLite database operations and key-value backends for the event store.
"""

import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Protocol

from core.config import DB_PATH
from core.errors import PersistenceError

SCHEMA = [
    """
    CREATE TABLE IF NOT EXISTS kv_store (
        key TEXT PRIMARY KEY,
        value TEXT NOT NULL,
        updated_at TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS api_requests (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        request_id TEXT UNIQUE NOT NULL,
        timestamp TEXT NOT NULL,
        endpoint TEXT NOT NULL,
        method TEXT NOT NULL,
        client_ip TEXT,
        status_code INTEGER NOT NULL,
        processing_time_ms INTEGER NOT NULL
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_api_requests_timestamp ON api_requests(timestamp)",
    "CREATE INDEX IF NOT EXISTS idx_api_requests_status ON api_requests(status_code)",
]


def get_connection(db_path: Path | None = None) -> sqlite3.Connection:
    """Get a database connection, creating the parent directory if needed."""
    path = Path(db_path) if db_path is not None else DB_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    return sqlite3.connect(path)


def init_schema(conn: sqlite3.Connection) -> None:
    """Create all tables and indexes if they don't exist."""
    cursor = conn.cursor()
    for statement in SCHEMA:
        cursor.execute(statement)
    conn.commit()


class KeyValueStore(Protocol):
    """Synchronous key-value backend holding serialized collections."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryKeyValueStore:
    """In-process backend; contents live as long as the object."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class SQLiteKeyValueStore:
    """
    Backend storing each key as one row of the kv_store table.

    Every call opens its own connection and commits before returning, so a
    successful set() is durable.
    """

    def __init__(self, db_path: Path | None = None):
        self.db_path = Path(db_path) if db_path is not None else DB_PATH
        try:
            conn = get_connection(self.db_path)
            try:
                init_schema(conn)
            finally:
                conn.close()
        except (sqlite3.Error, OSError) as e:
            raise PersistenceError(f"Cannot open database at {self.db_path}: {e}") from e

    def get(self, key: str) -> str | None:
        try:
            conn = get_connection(self.db_path)
            try:
                row = conn.execute(
                    "SELECT value FROM kv_store WHERE key = ?", (key,)
                ).fetchone()
            finally:
                conn.close()
        except (sqlite3.Error, OSError) as e:
            raise PersistenceError(f"Failed to read '{key}': {e}") from e
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        try:
            conn = get_connection(self.db_path)
            try:
                conn.execute(
                    """
                    INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = excluded.updated_at
                    """,
                    (key, value, datetime.now().isoformat()),
                )
                conn.commit()
            finally:
                conn.close()
        except (sqlite3.Error, OSError) as e:
            raise PersistenceError(f"Failed to write '{key}': {e}") from e
