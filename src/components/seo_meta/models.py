"""
SEO meta component models.

Request binding, metadata snapshots, per-locale title configuration,
component input/output models and errors.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

DEFAULT_TITLE_FORMAT = "{{ title }} {{ separator }} {{ suffix }}"
DEFAULT_TITLE_SEPARATOR = "|"
MAX_TITLE_LENGTH = 70

CACHE_NAMESPACE = "seo-meta-manager"
CACHE_TTL_MINUTES = 90

HOMEPAGE_PRESENTERS = ("Homepage", "Front:Homepage")
HOMEPAGE_ACTION = "default"


# --- Errors ---


class NotBoundError(RuntimeError):
    """Raised when the manager is used before a request match was bound."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(
            f"Can not {operation}, because SeoMetaManager has not been registered "
            "to the router or router does not match this request."
        )


class InvalidLinkError(Exception):
    """Raised by link builders when a route/params combination has no URL."""

    def __init__(self, route_name: str, message: str | None = None) -> None:
        self.route_name = route_name
        super().__init__(message or f"Can not build link to route '{route_name}'")


# --- Request Binding ---


@dataclass(frozen=True)
class RequestMatch:
    """Matched request: path info plus router match parameters."""

    path: str
    params: Mapping[str, str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    @property
    def presenter(self) -> str:
        return self.params.get("presenter", "")

    @property
    def action(self) -> str:
        return self.params.get("action", "")

    @property
    def locale(self) -> str | None:
        return self.params.get("locale")

    @property
    def route_name(self) -> str:
        """Route in format [Module:Presenter:action] or [Presenter:action]."""
        return f"{self.presenter}:{self.action}"

    @property
    def route_params(self) -> dict[str, str]:
        """Match params without the presenter and action keys."""
        return {k: v for k, v in self.params.items() if k not in ("presenter", "action")}

    def is_homepage(self) -> bool:
        return self.presenter in HOMEPAGE_PRESENTERS and self.action == HOMEPAGE_ACTION


# --- Metadata Snapshots ---


@dataclass(frozen=True)
class MetadataRecord:
    """Metadata configured for one (path, locale) pair."""

    present: bool = True
    meta_title: str | None = None
    meta_description: str | None = None
    og_title: str | None = None
    og_description: str | None = None
    no_index: bool = False
    no_follow: bool = False

    @classmethod
    def absent(cls) -> MetadataRecord:
        """Sentinel for paths without any configured metadata."""
        return cls(present=False)


@dataclass(frozen=True)
class TitleFormatConfig:
    """Title formatting rules for one locale."""

    format: str = DEFAULT_TITLE_FORMAT
    separator: str | None = None
    suffix: str | None = None
    site_name: str | None = None


@dataclass(frozen=True)
class AlternateLink:
    """Locale variant of the current page."""

    locale: str
    url: str


# --- Component Input Models ---


@dataclass(frozen=True)
class RenderHeadInput:
    """Input for rendering the head metadata block of a matched request."""

    path: str
    params: Mapping[str, str]


@dataclass(frozen=True)
class InvalidateCacheInput:
    """Input for clearing the cached metadata blocks."""

    pass


# --- Component Output Models ---


@dataclass(frozen=True)
class SeoMetaError:
    """Error reported by a component entry point."""

    code: str
    message: str


@dataclass(frozen=True)
class RenderHeadOutput:
    """Output of the head rendering operation."""

    html: str | None
    title: str | None
    alternates: tuple[AlternateLink, ...] = ()
    errors: list[SeoMetaError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class InvalidateCacheOutput:
    """Output of the cache invalidation operation."""

    errors: list[SeoMetaError] = field(default_factory=list)
    success: bool = True
