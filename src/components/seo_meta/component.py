"""
SEO meta component - head metadata for matched requests.

Builds the title, meta/OG tags, robots directive and alternate locale links
for a request match, cached per (path, locale).

Invariants:
- I1: Output attribute values are escaped (no XSS)
- I2: Tag order is title, description, OG, robots, alternates, OG image
- I3: Pages without metadata produce no output and no cache entry
- I4: A locale without a valid link never fails the render
"""

from __future__ import annotations

from ._cache import MetaCache
from ._impl import create_seo_meta_manager
from .models import (
    CACHE_NAMESPACE,
    CACHE_TTL_MINUTES,
    InvalidateCacheInput,
    InvalidateCacheOutput,
    RenderHeadInput,
    RenderHeadOutput,
    SeoMetaError,
)
from .ports import (
    CacheStorePort,
    LinkBuilderPort,
    LocaleConfigPort,
    MetadataSourcePort,
    OgImageResolverPort,
)


def run_render_head(
    inp: RenderHeadInput,
    *,
    metadata_source: MetadataSourcePort,
    locale_config: LocaleConfigPort,
    link_builder: LinkBuilderPort,
    cache_store: CacheStorePort,
    og_image_resolver: OgImageResolverPort | None = None,
    namespace: str = CACHE_NAMESPACE,
    cache_ttl_minutes: int = CACHE_TTL_MINUTES,
) -> RenderHeadOutput:
    """
    Render head metadata for a request match.

    Args:
        inp: Input containing path info and router match params.
        metadata_source: Metadata lookup port.
        locale_config: Localization port.
        link_builder: URL generator port.
        cache_store: Cache store port.
        og_image_resolver: Optional OG image resolver port.
        namespace: Cache namespace of the rendered blocks.
        cache_ttl_minutes: Expiration of rendered blocks.

    Returns:
        RenderHeadOutput with the rendered block, title and alternates.
    """
    if "presenter" not in inp.params or "action" not in inp.params:
        return RenderHeadOutput(
            html=None,
            title=None,
            errors=[
                SeoMetaError(
                    code="invalid_match",
                    message="Match params must contain 'presenter' and 'action'",
                )
            ],
            success=False,
        )

    manager = create_seo_meta_manager(
        metadata_source=metadata_source,
        locale_config=locale_config,
        link_builder=link_builder,
        cache_store=cache_store,
        og_image_resolver=og_image_resolver,
        namespace=namespace,
        cache_ttl_minutes=cache_ttl_minutes,
    )
    manager.matched(inp.path, inp.params)

    return RenderHeadOutput(
        html=manager.get_html(),
        title=manager.get_title(),
        alternates=tuple(manager.get_alternate_links()),
    )


def run_invalidate_cache(
    inp: InvalidateCacheInput,
    *,
    cache_store: CacheStorePort,
    namespace: str = CACHE_NAMESPACE,
) -> InvalidateCacheOutput:
    """Clear every cached metadata block of the namespace."""
    MetaCache(cache_store, namespace).clean()
    return InvalidateCacheOutput()


def run(
    inp: RenderHeadInput | InvalidateCacheInput,
    *,
    metadata_source: MetadataSourcePort,
    locale_config: LocaleConfigPort,
    link_builder: LinkBuilderPort,
    cache_store: CacheStorePort,
    og_image_resolver: OgImageResolverPort | None = None,
    namespace: str = CACHE_NAMESPACE,
    cache_ttl_minutes: int = CACHE_TTL_MINUTES,
) -> RenderHeadOutput | InvalidateCacheOutput:
    """
    Main entry point for the SEO meta component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, RenderHeadInput):
        return run_render_head(
            inp,
            metadata_source=metadata_source,
            locale_config=locale_config,
            link_builder=link_builder,
            cache_store=cache_store,
            og_image_resolver=og_image_resolver,
            namespace=namespace,
            cache_ttl_minutes=cache_ttl_minutes,
        )
    elif isinstance(inp, InvalidateCacheInput):
        return run_invalidate_cache(inp, cache_store=cache_store, namespace=namespace)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
