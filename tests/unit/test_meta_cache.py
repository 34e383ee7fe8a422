"""
Tests for the metadata cache layer and cache store adapters.
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import pytest

from src.adapters.clock import FrozenClock
from src.adapters.memory_cache import InMemoryCacheStore
from src.adapters.sqlite.cache_store import SQLiteCacheStore
from src.components.seo_meta import CACHE_NAMESPACE, MetaCache


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(datetime(2024, 6, 15, 12, 0, 0, tzinfo=UTC))


@pytest.fixture(params=["memory", "sqlite"])
def store(request: pytest.FixtureRequest, clock: FrozenClock, tmp_path: Path):
    """Each test runs against both store adapters."""
    if request.param == "memory":
        return InMemoryCacheStore(clock)
    return SQLiteCacheStore(str(tmp_path / "cache.db"), clock)


class TestCacheStore:
    """Contract tests shared by the store adapters."""

    def test_missing_key_returns_none(self, store) -> None:
        assert store.get("missing") is None

    def test_set_then_get(self, store) -> None:
        store.set("key", "value", 90)
        assert store.get("key") == "value"

    def test_set_replaces_value(self, store) -> None:
        store.set("key", "old", 90)
        store.set("key", "new", 90)
        assert store.get("key") == "new"

    def test_entry_expires(self, store, clock: FrozenClock) -> None:
        store.set("key", "value", 90)
        clock.advance(minutes=89, seconds=59)
        assert store.get("key") == "value"
        clock.advance(seconds=1)
        assert store.get("key") is None

    def test_keys_with_nul_bytes(self, store) -> None:
        store.set("ns\x00path\x00en", "en", 90)
        store.set("ns\x00path\x00cs", "cs", 90)
        assert store.get("ns\x00path\x00en") == "en"
        assert store.get("ns\x00path\x00cs") == "cs"

    def test_clear_all_without_prefix(self, store) -> None:
        store.set("a", "1", 90)
        store.set("b", "2", 90)
        store.clear_all()
        assert store.get("a") is None
        assert store.get("b") is None

    def test_clear_all_with_prefix(self, store) -> None:
        store.set("one\x00a", "1", 90)
        store.set("two\x00a", "2", 90)
        store.clear_all(prefix="one\x00")
        assert store.get("one\x00a") is None
        assert store.get("two\x00a") == "2"


class TestMetaCache:
    """Test namespace handling."""

    def test_keys_are_prefixed(self, clock: FrozenClock) -> None:
        store = InMemoryCacheStore(clock)
        cache = MetaCache(store)
        cache.save("path\x00en", "<title>x</title>", 90)

        assert store.get(f"{CACHE_NAMESPACE}\x00path\x00en") == "<title>x</title>"
        assert cache.load("path\x00en") == "<title>x</title>"

    def test_namespaces_are_isolated(self, clock: FrozenClock) -> None:
        store = InMemoryCacheStore(clock)
        first = MetaCache(store, "first")
        second = MetaCache(store, "second")
        first.save("k", "1", 90)
        second.save("k", "2", 90)

        first.clean()

        assert first.load("k") is None
        assert second.load("k") == "2"

    def test_prefix_does_not_match_longer_namespace(self, clock: FrozenClock) -> None:
        """Cleaning "seo" leaves "seo-extra" untouched."""
        store = InMemoryCacheStore(clock)
        short = MetaCache(store, "seo")
        longer = MetaCache(store, "seo-extra")
        short.save("k", "1", 90)
        longer.save("k", "2", 90)

        short.clean()

        assert longer.load("k") == "2"


class TestSQLiteCacheStore:
    """SQLite specific behavior."""

    def test_entries_persist_across_instances(self, tmp_path: Path, clock: FrozenClock) -> None:
        db_path = str(tmp_path / "cache.db")
        SQLiteCacheStore(db_path, clock).set("key", "value", 90)
        assert SQLiteCacheStore(db_path, clock).get("key") == "value"

    def test_purge_expired(self, tmp_path: Path, clock: FrozenClock) -> None:
        store = SQLiteCacheStore(str(tmp_path / "cache.db"), clock)
        store.set("short", "1", 1)
        store.set("long", "2", 90)
        clock.advance(minutes=5)

        assert store.purge_expired() == 1
        assert store.get("long") == "2"
