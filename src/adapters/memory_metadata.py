"""In-memory metadata source adapter.

Implements MetadataSourcePort from a dict, for tests and static sites
whose metadata ships with the rules file.
"""

from src.components.seo_meta import MetadataRecord


class InMemoryMetadataSource:
    """Metadata keyed by (path, locale)."""

    def __init__(self, records: dict[tuple[str, str], MetadataRecord] | None = None) -> None:
        self._records: dict[tuple[str, str], MetadataRecord] = dict(records or {})
        self.lookups = 0

    def add(self, path: str, locale: str, record: MetadataRecord) -> None:
        self._records[(path, locale)] = record

    def remove(self, path: str, locale: str) -> None:
        self._records.pop((path, locale), None)

    def lookup(self, path: str, locale: str) -> MetadataRecord:
        self.lookups += 1
        return self._records.get((path, locale), MetadataRecord.absent())
