"""
SQLite cache store adapter.

Implements CacheStorePort on a single table. Keys are stored as UTF-8 BLOBs
because cache keys contain NUL separators, which SQLite string functions
treat as terminators.
"""

from __future__ import annotations

import sqlite3
from datetime import timedelta

from src.adapters.clock import SystemClock
from src.ports.clock import ClockPort

_SCHEMA = """
    CREATE TABLE IF NOT EXISTS seo_meta_cache (
        key BLOB PRIMARY KEY,
        value TEXT NOT NULL,
        expires_at REAL NOT NULL
    );
"""


class SQLiteCacheStore:
    """Cache store persisted in SQLite, shared across worker processes."""

    def __init__(self, db_path: str, clock: ClockPort | None = None) -> None:
        self.db_path = db_path
        self._clock = clock or SystemClock()
        conn = self._connect()
        try:
            with conn:
                conn.execute(_SCHEMA)
        finally:
            conn.close()

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path)

    def _now(self) -> float:
        return self._clock.now_utc().timestamp()

    def get(self, key: str) -> str | None:
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT value, expires_at FROM seo_meta_cache WHERE key = ?",
                (key.encode("utf-8"),),
            ).fetchone()
            if row is None:
                return None
            if row[1] <= self._now():
                with conn:
                    conn.execute("DELETE FROM seo_meta_cache WHERE key = ?", (key.encode("utf-8"),))
                return None
            return str(row[0])
        finally:
            conn.close()

    def set(self, key: str, value: str, ttl_minutes: int) -> None:
        expires_at = (self._clock.now_utc() + timedelta(minutes=ttl_minutes)).timestamp()
        conn = self._connect()
        try:
            with conn:
                conn.execute(
                    "INSERT OR REPLACE INTO seo_meta_cache (key, value, expires_at) "
                    "VALUES (?, ?, ?)",
                    (key.encode("utf-8"), value, expires_at),
                )
        finally:
            conn.close()

    def clear_all(self, prefix: str = "") -> None:
        conn = self._connect()
        try:
            with conn:
                if not prefix:
                    conn.execute("DELETE FROM seo_meta_cache")
                else:
                    raw = prefix.encode("utf-8")
                    conn.execute(
                        "DELETE FROM seo_meta_cache WHERE substr(key, 1, ?) = ?",
                        (len(raw), raw),
                    )
        finally:
            conn.close()

    def purge_expired(self) -> int:
        """Delete expired entries. Returns count deleted."""
        conn = self._connect()
        try:
            with conn:
                cursor = conn.execute(
                    "DELETE FROM seo_meta_cache WHERE expires_at <= ?", (self._now(),)
                )
            return cursor.rowcount
        finally:
            conn.close()
