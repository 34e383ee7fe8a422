"""
Admin SEO API.

Provides cache invalidation and a metadata preview for arbitrary routes.

Key behaviors:
- POST /cache/invalidate: clears every cached metadata block (204)
- GET /preview: renders the metadata block a route would get, 404 if none;
  rendered on a throwaway cache, never through the shared one
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from pydantic import BaseModel

from src.adapters.memory_cache import InMemoryCacheStore
from src.api.deps import (
    build_manager,
    get_cache_store,
    get_metadata_source,
    get_rules,
    split_route_name,
)
from src.components.seo_meta import CacheStorePort, MetadataSourcePort
from src.rules.models import Rules

logger = logging.getLogger(__name__)

router = APIRouter()


# --- Response Models ---


class AlternateResponse(BaseModel):
    """Alternate locale link."""

    locale: str
    url: str


class PreviewResponse(BaseModel):
    """Rendered metadata preview."""

    path: str
    locale: str
    title: str | None
    html: str
    alternates: list[AlternateResponse]


# --- Endpoints ---


@router.post(
    "/cache/invalidate",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Invalidate metadata cache",
)
def invalidate_cache(
    request: Request,
    rules: Rules = Depends(get_rules),
    metadata_source: MetadataSourcePort = Depends(get_metadata_source),
    cache_store: CacheStorePort = Depends(get_cache_store),
) -> None:
    """Clear all cached metadata blocks, e.g. after editing page metadata."""
    build_manager(request, rules, metadata_source, cache_store).invalidate_cache()
    logger.info("Metadata cache invalidated via admin API")


@router.get(
    "/preview",
    response_model=PreviewResponse,
    summary="Preview metadata",
)
def preview(
    request: Request,
    path: str = Query(..., description="Path info without leading slash"),
    route: str = Query(..., description="Route name, e.g. Front:Article:detail"),
    locale: str | None = Query(None),
    rules: Rules = Depends(get_rules),
    metadata_source: MetadataSourcePort = Depends(get_metadata_source),
) -> PreviewResponse:
    """Render the metadata block for a route as the public page would."""
    presenter, action = split_route_name(route)
    params = {
        k: v for k, v in request.query_params.items() if k not in ("path", "route", "locale")
    }
    params.update(
        presenter=presenter,
        action=action,
        locale=locale or rules.localization.default_locale,
    )

    # Caller-chosen route and params must never reach the shared cache
    manager = build_manager(request, rules, metadata_source, InMemoryCacheStore())
    manager.matched(path.lstrip("/"), params)

    html = manager.get_html()
    if html is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No metadata configured for '/{path.lstrip('/')}'",
        )

    return PreviewResponse(
        path=path.lstrip("/"),
        locale=params["locale"],
        title=manager.get_title(),
        html=html,
        alternates=[
            AlternateResponse(locale=a.locale, url=a.url) for a in manager.get_alternate_links()
        ],
    )
