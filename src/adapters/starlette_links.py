"""
Starlette link builder adapter.

Implements LinkBuilderPort with the application's own route table: route
names are the "Presenter:action" names given to FastAPI routes.
"""

from __future__ import annotations

from collections.abc import Mapping

from starlette.applications import Starlette
from starlette.routing import NoMatchFound

from src.components.seo_meta import InvalidLinkError


class StarletteLinkBuilder:
    """Build absolute URLs via Starlette's url_path_for."""

    def __init__(self, app: Starlette, base_url: str) -> None:
        self._app = app
        self._base_url = base_url.rstrip("/")

    def build_link(self, route_name: str, params: Mapping[str, str]) -> str:
        try:
            path = self._app.url_path_for(route_name, **params)
        except NoMatchFound as e:
            raise InvalidLinkError(route_name, str(e)) from e
        except (AssertionError, ValueError) as e:
            # Path convertors reject values with assert (str, path) or int()/float()
            raise InvalidLinkError(
                route_name, f"Invalid parameter for route '{route_name}': {e}"
            ) from e
        return f"{self._base_url}{path}"
