import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends, Request
from starlette.routing import BaseRoute

from src.adapters.memory_cache import InMemoryCacheStore
from src.adapters.rules_locale import RulesLocaleConfig, RulesOgImageResolver
from src.adapters.sqlite.cache_store import SQLiteCacheStore
from src.adapters.sqlite.metadata_repo import SQLiteMetadataSource
from src.adapters.starlette_links import StarletteLinkBuilder
from src.components.seo_meta import (
    CacheStorePort,
    MetadataSourcePort,
    SeoMetaManager,
    create_seo_meta_manager,
)
from src.rules.loader import load_rules
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("SEO_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "seo_meta.db")
        self.rules_path = Path(os.environ.get("SEO_RULES_PATH", str(self.base_dir / "rules.yaml")))
        self.cache_backend = os.environ.get("SEO_CACHE_BACKEND", "memory")
        self.base_url = os.environ.get("SEO_BASE_URL")


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules() -> Rules:
    return load_rules(get_settings().rules_path)


# --- Shared Collaborators ---
@lru_cache
def get_cache_store() -> CacheStorePort:
    """Process-wide cache store; the only state shared between requests."""
    settings = get_settings()
    if settings.cache_backend == "sqlite":
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        return SQLiteCacheStore(settings.db_path)
    return InMemoryCacheStore()


@lru_cache
def get_metadata_source() -> MetadataSourcePort:
    settings = get_settings()
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    source = SQLiteMetadataSource(settings.db_path)
    source.ensure_schema()
    return source


# --- Request Binding ---
def split_route_name(name: str) -> tuple[str, str]:
    """Split "Module:Presenter:action" into presenter and action."""
    presenter, sep, action = name.rpartition(":")
    if not sep:
        return name, "default"
    return presenter, action


def bind_request(manager: SeoMetaManager, request: Request) -> None:
    """
    Bind the matched route of a request to the manager.

    Requests without a named route stay unbound.
    """
    route: BaseRoute | None = request.scope.get("route")
    name = getattr(route, "name", None)
    if not name:
        return

    presenter, action = split_route_name(name)
    params = {k: str(v) for k, v in request.path_params.items()}
    params.update(presenter=presenter, action=action)
    manager.matched(request.url.path.lstrip("/"), params)


def build_manager(
    request: Request,
    rules: Rules,
    metadata_source: MetadataSourcePort,
    cache_store: CacheStorePort,
) -> SeoMetaManager:
    """Create an unbound request-scoped manager."""
    base_url = get_settings().base_url or str(request.base_url)
    return create_seo_meta_manager(
        metadata_source=metadata_source,
        locale_config=RulesLocaleConfig(rules.localization),
        link_builder=StarletteLinkBuilder(request.app, base_url),
        cache_store=cache_store,
        og_image_resolver=RulesOgImageResolver(rules.og_image),
        namespace=rules.cache.namespace,
        cache_ttl_minutes=rules.cache.ttl_minutes,
    )


def get_seo_meta_manager(
    request: Request,
    rules: Rules = Depends(get_rules),
    metadata_source: MetadataSourcePort = Depends(get_metadata_source),
    cache_store: CacheStorePort = Depends(get_cache_store),
) -> SeoMetaManager:
    """Request-scoped manager bound to the matched route."""
    manager = build_manager(request, rules, metadata_source, cache_store)
    bind_request(manager, request)
    return manager
