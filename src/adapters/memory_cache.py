"""In-memory cache store adapter.

This adapter implements CacheStorePort for the SEO meta component.
Entries expire lazily: an expired entry is dropped on the next read.
"""

import threading
from dataclasses import dataclass
from datetime import datetime, timedelta

from src.adapters.clock import SystemClock
from src.ports.clock import ClockPort


@dataclass(frozen=True)
class _Entry:
    value: str
    expires_at: datetime


class InMemoryCacheStore:
    """In-memory cache storage - suitable for single-process deployments."""

    def __init__(self, clock: ClockPort | None = None) -> None:
        self._clock = clock or SystemClock()
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        """Get value by key, None if missing or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.expires_at <= self._clock.now_utc():
                del self._entries[key]
                return None
            return entry.value

    def set(self, key: str, value: str, ttl_minutes: int) -> None:
        """Save value, replacing any previous entry."""
        expires_at = self._clock.now_utc() + timedelta(minutes=ttl_minutes)
        with self._lock:
            self._entries[key] = _Entry(value=value, expires_at=expires_at)

    def clear_all(self, prefix: str = "") -> None:
        """Delete all entries with the given key prefix."""
        with self._lock:
            if not prefix:
                self._entries.clear()
                return
            for key in [k for k in self._entries if k.startswith(prefix)]:
                del self._entries[key]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
