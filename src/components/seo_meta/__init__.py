"""
SEO meta component - cached head metadata for matched requests.
"""

from ._cache import MetaCache
from ._context import RequestContext
from ._impl import SeoMetaManager, create_seo_meta_manager
from .component import run, run_invalidate_cache, run_render_head
from .fc import escape_html, escape_html_attr, format_title
from .models import (
    CACHE_NAMESPACE,
    CACHE_TTL_MINUTES,
    DEFAULT_TITLE_FORMAT,
    DEFAULT_TITLE_SEPARATOR,
    MAX_TITLE_LENGTH,
    AlternateLink,
    InvalidateCacheInput,
    InvalidateCacheOutput,
    InvalidLinkError,
    MetadataRecord,
    NotBoundError,
    RenderHeadInput,
    RenderHeadOutput,
    RequestMatch,
    SeoMetaError,
    TitleFormatConfig,
)
from .ports import (
    CacheStorePort,
    LinkBuilderPort,
    LocaleConfigPort,
    MetadataSourcePort,
    OgImageResolverPort,
)

__all__ = [
    # Entry points
    "run",
    "run_invalidate_cache",
    "run_render_head",
    # Service
    "SeoMetaManager",
    "create_seo_meta_manager",
    "MetaCache",
    "RequestContext",
    # Functional core
    "escape_html",
    "escape_html_attr",
    "format_title",
    # Models
    "AlternateLink",
    "MetadataRecord",
    "RequestMatch",
    "TitleFormatConfig",
    "InvalidateCacheInput",
    "InvalidateCacheOutput",
    "RenderHeadInput",
    "RenderHeadOutput",
    "SeoMetaError",
    # Errors
    "InvalidLinkError",
    "NotBoundError",
    # Constants
    "CACHE_NAMESPACE",
    "CACHE_TTL_MINUTES",
    "DEFAULT_TITLE_FORMAT",
    "DEFAULT_TITLE_SEPARATOR",
    "MAX_TITLE_LENGTH",
    # Ports
    "CacheStorePort",
    "LinkBuilderPort",
    "LocaleConfigPort",
    "MetadataSourcePort",
    "OgImageResolverPort",
]
