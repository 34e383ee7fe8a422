"""
Rules-backed localization adapters.

RulesLocaleConfig implements LocaleConfigPort and RulesOgImageResolver
implements OgImageResolverPort from the loaded rules file.
"""

from __future__ import annotations

from collections.abc import Mapping

from src.rules.models import LocalizationRules, OgImageRules


class RulesLocaleConfig:
    """Locale settings from the localization section of the rules."""

    def __init__(self, rules: LocalizationRules, current_locale: str | None = None) -> None:
        self._rules = rules
        self._current = current_locale

    def available_locales(self) -> list[str]:
        return list(self._rules.available_locales)

    def title_format(self, locale: str) -> str:
        return self._rules.title_format.get(locale, self._rules.default_title_format)

    def title_separator(self, locale: str) -> str | None:
        return self._rules.title_separator.get(locale)

    def title_suffix(self, locale: str) -> str | None:
        return self._rules.title_suffix.get(locale)

    def site_name(self, locale: str) -> str | None:
        return self._rules.site_name.get(locale)

    def current_locale(self) -> str:
        return self._current or self._rules.default_locale


class RulesOgImageResolver:
    """
    Resolve OG image using fallback chain.

    Resolution order:
    1. Image configured for the route (highest priority)
    2. Default image (lowest priority)

    Returns None if no image available.
    """

    def __init__(self, rules: OgImageRules) -> None:
        self._rules = rules

    def resolve(self, route_name: str, params: Mapping[str, str]) -> str | None:
        route_image = self._rules.routes.get(route_name)
        if route_image:
            return route_image.format_map(_MissingKeys(params))
        if self._rules.default_url:
            return self._rules.default_url
        return None


class _MissingKeys(dict[str, str]):
    """format_map helper that leaves unknown placeholders empty."""

    def __missing__(self, key: str) -> str:
        return ""
