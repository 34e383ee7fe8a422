"""
SEO meta component port definitions.

The manager only talks to these collaborators; adapters live in src/adapters.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol

from .models import MetadataRecord


class MetadataSourcePort(Protocol):
    """Port for reading metadata configured for a path."""

    def lookup(self, path: str, locale: str) -> MetadataRecord:
        """Get metadata for path and locale, MetadataRecord.absent() if none."""
        ...


class LocaleConfigPort(Protocol):
    """Port for the localization subsystem."""

    def available_locales(self) -> Sequence[str]:
        """Get locales in the order alternate links are rendered."""
        ...

    def title_format(self, locale: str) -> str:
        """Get title mask for locale."""
        ...

    def title_separator(self, locale: str) -> str | None:
        """Get title separator for locale (None means default '|')."""
        ...

    def title_suffix(self, locale: str) -> str | None:
        """Get title suffix for locale."""
        ...

    def site_name(self, locale: str) -> str | None:
        """Get site name for locale."""
        ...

    def current_locale(self) -> str:
        """Get locale used when the match carries none."""
        ...


class LinkBuilderPort(Protocol):
    """Port for absolute URL generation."""

    def build_link(self, route_name: str, params: Mapping[str, str]) -> str:
        """Build absolute URL. Raises InvalidLinkError for invalid route/params."""
        ...


class OgImageResolverPort(Protocol):
    """Port for resolving the Open Graph image of a page."""

    def resolve(self, route_name: str, params: Mapping[str, str]) -> str | None:
        """
        Resolve image URL.

        Args:
            route_name: Route in format [Module:Presenter:action] or [Presenter:action]
            params: Router params without the presenter and action keys

        Returns:
            Absolute URL, or None if no image is available.
        """
        ...


class CacheStorePort(Protocol):
    """Port for the key-value storage behind the metadata cache."""

    def get(self, key: str) -> str | None:
        """Get value, None if missing or expired."""
        ...

    def set(self, key: str, value: str, ttl_minutes: int) -> None:
        """Store value with expiration."""
        ...

    def clear_all(self, prefix: str = "") -> None:
        """Remove every key starting with prefix (all keys when empty)."""
        ...
