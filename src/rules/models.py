from string import Formatter

from pydantic import BaseModel, Field, field_validator

from src.components.seo_meta import CACHE_NAMESPACE, CACHE_TTL_MINUTES, DEFAULT_TITLE_FORMAT


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class LocalizationRules(BaseModel):
    default_locale: str
    available_locales: list[str]
    title_format: dict[str, str] = Field(default_factory=dict)
    title_separator: dict[str, str] = Field(default_factory=dict)
    title_suffix: dict[str, str] = Field(default_factory=dict)
    site_name: dict[str, str] = Field(default_factory=dict)
    default_title_format: str = DEFAULT_TITLE_FORMAT

class CacheRules(BaseModel):
    namespace: str = CACHE_NAMESPACE
    ttl_minutes: int = Field(default=CACHE_TTL_MINUTES, gt=0)

class OgImageRules(BaseModel):
    default_url: str | None = None
    routes: dict[str, str] = Field(default_factory=dict)

    @field_validator("routes")
    @classmethod
    def validate_route_templates(cls, v: dict[str, str]) -> dict[str, str]:
        """Route images may only use plain {param} placeholders."""
        for route_name, template in v.items():
            try:
                fields = list(Formatter().parse(template))
            except ValueError as e:
                raise ValueError(f"Invalid image template for '{route_name}': {e}") from e
            for _, field_name, format_spec, conversion in fields:
                if field_name is None:
                    continue
                if not field_name.isidentifier() or format_spec or conversion:
                    raise ValueError(
                        f"Invalid placeholder '{{{field_name}}}' in image template for "
                        f"'{route_name}': only {{param}} names are allowed"
                    )
        return v

class Rules(BaseModel):
    project: ProjectRules
    localization: LocalizationRules
    cache: CacheRules = Field(default_factory=CacheRules)
    og_image: OgImageRules = Field(default_factory=OgImageRules)
