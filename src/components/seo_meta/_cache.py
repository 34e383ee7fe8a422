"""
Namespaced cache over a CacheStorePort.

Keys are prefixed with the namespace and a NUL byte, so the store can be
shared with other subsystems and cleaned per namespace.
"""

from __future__ import annotations

import logging

from .models import CACHE_NAMESPACE
from .ports import CacheStorePort

logger = logging.getLogger(__name__)


class MetaCache:
    """Cache for rendered metadata blocks."""

    def __init__(self, store: CacheStorePort, namespace: str = CACHE_NAMESPACE) -> None:
        self._store = store
        self._prefix = f"{namespace}\x00"

    @property
    def prefix(self) -> str:
        return self._prefix

    def load(self, key: str) -> str | None:
        return self._store.get(self._prefix + key)

    def save(self, key: str, value: str, ttl_minutes: int) -> None:
        self._store.set(self._prefix + key, value, ttl_minutes)

    def clean(self) -> None:
        """Remove every entry of this namespace."""
        self._store.clear_all(prefix=self._prefix)
        logger.info("Cleaned metadata cache namespace %r", self._prefix.rstrip("\x00"))
