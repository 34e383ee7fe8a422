"""
SeoMetaManager - HTML head metadata for the matched request.

Resolves title, description, Open Graph tags, robots directives and
alternate locale links for one request, and caches the rendered block
per (path, locale).

Key behaviors:
- Title is formatted by the locale's mask, homepage falls back to site name
- OG title/description fall back to title/description
- Locales without a valid link are skipped silently
- Rendered block is cached for 90 minutes; pages without metadata are not cached
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from ._cache import MetaCache
from ._context import RequestContext
from .fc import escape_html, escape_html_attr, format_title
from .models import (
    CACHE_TTL_MINUTES,
    AlternateLink,
    InvalidLinkError,
    MetadataRecord,
    RequestMatch,
    TitleFormatConfig,
)
from .ports import (
    CacheStorePort,
    LinkBuilderPort,
    LocaleConfigPort,
    MetadataSourcePort,
    OgImageResolverPort,
)

logger = logging.getLogger(__name__)


class SeoMetaManager:
    """
    Metadata resolver for a single request.

    One instance is bound per request via matched(); only the cache store is
    shared between requests.
    """

    def __init__(
        self,
        metadata_source: MetadataSourcePort,
        locale_config: LocaleConfigPort,
        link_builder: LinkBuilderPort,
        cache_store: CacheStorePort,
        og_image_resolver: OgImageResolverPort | None = None,
        cache_ttl_minutes: int = CACHE_TTL_MINUTES,
        cache: MetaCache | None = None,
    ) -> None:
        """
        Initialize manager.

        Args:
            metadata_source: Metadata lookup by path and locale
            locale_config: Localization settings
            link_builder: Absolute URL generator for alternate links
            cache_store: Key-value store shared between requests
            og_image_resolver: Optional OG image resolver
            cache_ttl_minutes: Expiration of rendered blocks
            cache: Preconfigured namespaced cache (overrides cache_store namespace)
        """
        self._metadata_source = metadata_source
        self._locale_config = locale_config
        self._link_builder = link_builder
        self._cache = cache or MetaCache(cache_store)
        self._og_image_resolver = og_image_resolver
        self._cache_ttl = cache_ttl_minutes
        self._context = RequestContext()

    # --- Request Binding ---

    def matched(self, path: str, match_params: Mapping[str, str]) -> None:
        """Router hook: bind the matched path and params."""
        self._context.bind(path, match_params)

    def is_ok(self) -> bool:
        return self._context.is_bound()

    def set_og_image_resolver(self, resolver: OgImageResolverPort) -> None:
        self._og_image_resolver = resolver

    def invalidate_cache(self) -> None:
        """Clear all cached blocks of this subsystem."""
        self._cache.clean()

    clean_cache = invalidate_cache

    # --- Rendering ---

    def get_html(self) -> str | None:
        """
        Render the metadata block for the bound request.

        Returns:
            Newline separated tags, or None when the page has no metadata.

        Raises:
            NotBoundError: If no request match was bound.
        """
        match = self._context.require("compile HTML meta tags")
        locale = self._get_locale(match)
        cache_key = f"{match.path}\x00{locale}"

        cached = self._cache.load(cache_key)
        if cached is not None:
            logger.debug("Metadata cache hit for %r", cache_key)
            return cached

        meta = self._metadata_source.lookup(match.path, locale)
        if not meta.present:
            return None

        tags: list[str] = []
        title = self.get_title()
        if title is not None:
            tags.append(f"<title>{escape_html(title)}</title>")
        else:
            logger.warning('Possible bug: Meta title for page "/%s" is not available.', match.path)

        if meta.meta_description is not None:
            tags.append(
                f'<meta name="description" content="{escape_html_attr(meta.meta_description)}">'
            )
        if meta.og_title is not None:
            tags.append(f'<meta property="og:title" content="{escape_html_attr(meta.og_title)}">')
        if meta.og_description is not None:
            og_description = escape_html_attr(meta.og_description)
            tags.append(f'<meta property="og:description" content="{og_description}">')

        # https://developers.google.com/search/reference/robots_meta_tag
        robots_policy: list[str] = []
        if meta.no_index:
            robots_policy.append("noindex")
        if meta.no_follow:
            robots_policy.append("nofollow")
        if robots_policy:
            tags.append(
                f'<meta name="robots" content="{escape_html_attr(", ".join(robots_policy))}">'
            )

        for alternate in self._build_alternates(match):
            tags.append(
                f'<link rel="alternate" href="{escape_html_attr(alternate.url)}"'
                f' hreflang="{escape_html_attr(alternate.locale)}">'
            )

        if self._og_image_resolver is not None:
            og_image_url = self._og_image_resolver.resolve(match.route_name, match.route_params)
            if og_image_url is not None:
                og_image = escape_html_attr(og_image_url)
                tags.append(f'<meta property="og:image" content="{og_image}">')

        if not tags:
            return None

        html = "\n".join(tags)
        self._cache.save(cache_key, html, self._cache_ttl)
        logger.debug("Metadata cached for %r (%d tags)", cache_key, len(tags))
        return html

    def get_alternate_links(self) -> list[AlternateLink]:
        """Locale variants of the current page, in available-locales order."""
        match = self._context.require("compile alternate links")
        return self._build_alternates(match)

    # --- Accessors ---

    def get_title(self) -> str | None:
        match = self._context.require("compile title")
        locale = self._get_locale(match)
        meta = self._metadata_source.lookup(match.path, locale)
        config = self._get_title_config(locale)

        if meta.meta_title is not None:
            return format_title(config.format, meta.meta_title, config.separator, config.suffix)
        if match.is_homepage():
            return config.site_name
        return None

    def get_meta_description(self) -> str | None:
        return self._get_metadata().meta_description

    def get_og_title(self) -> str | None:
        og_title = self._get_metadata().og_title
        return og_title if og_title is not None else self.get_title()

    def get_og_description(self) -> str | None:
        og_description = self._get_metadata().og_description
        return og_description if og_description is not None else self.get_meta_description()

    def is_no_index(self) -> bool:
        return self._get_metadata().no_index

    def is_no_follow(self) -> bool:
        return self._get_metadata().no_follow

    # --- Internals ---

    def _get_metadata(self) -> MetadataRecord:
        match = self._context.require("get meta data")
        return self._metadata_source.lookup(match.path, self._get_locale(match))

    def _get_locale(self, match: RequestMatch) -> str:
        if match.locale is not None:
            return match.locale
        return self._locale_config.current_locale()

    def _get_title_config(self, locale: str) -> TitleFormatConfig:
        return TitleFormatConfig(
            format=self._locale_config.title_format(locale),
            separator=self._locale_config.title_separator(locale),
            suffix=self._locale_config.title_suffix(locale),
            site_name=self._locale_config.site_name(locale),
        )

    def _build_alternates(self, match: RequestMatch) -> list[AlternateLink]:
        route_name = match.route_name
        params = match.route_params
        alternates: list[AlternateLink] = []
        for locale in self._locale_config.available_locales():
            url = self._try_build_link(route_name, {**params, "locale": locale})
            if url is not None:
                alternates.append(AlternateLink(locale=locale, url=url))
        return alternates

    def _try_build_link(self, route_name: str, params: Mapping[str, str]) -> str | None:
        try:
            return self._link_builder.build_link(route_name, params)
        except InvalidLinkError as e:
            logger.debug("Skipping alternate link: %s", e)
            return None


# --- Factory ---


def create_seo_meta_manager(
    metadata_source: MetadataSourcePort,
    locale_config: LocaleConfigPort,
    link_builder: LinkBuilderPort,
    cache_store: CacheStorePort,
    og_image_resolver: OgImageResolverPort | None = None,
    namespace: str | None = None,
    cache_ttl_minutes: int = CACHE_TTL_MINUTES,
) -> SeoMetaManager:
    """
    Create an unbound manager.

    Args:
        metadata_source: Metadata lookup
        locale_config: Localization settings
        link_builder: URL generator
        cache_store: Shared cache store
        og_image_resolver: Optional OG image resolver
        namespace: Cache namespace override
        cache_ttl_minutes: Expiration of rendered blocks

    Returns:
        Configured SeoMetaManager
    """
    cache = MetaCache(cache_store, namespace) if namespace else None
    return SeoMetaManager(
        metadata_source=metadata_source,
        locale_config=locale_config,
        link_builder=link_builder,
        cache_store=cache_store,
        og_image_resolver=og_image_resolver,
        cache_ttl_minutes=cache_ttl_minutes,
        cache=cache,
    )
