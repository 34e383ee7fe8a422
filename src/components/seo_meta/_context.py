"""
Request context - per-request binding of the matched route.
"""

from __future__ import annotations

from collections.abc import Mapping

from .models import NotBoundError, RequestMatch


class RequestContext:
    """Holds the request match bound by the router for one request."""

    def __init__(self) -> None:
        self._match: RequestMatch | None = None

    def bind(self, path: str, match_params: Mapping[str, str]) -> None:
        """Record path and match params, replacing any prior binding."""
        self._match = RequestMatch(path=path, params=match_params)

    def is_bound(self) -> bool:
        return self._match is not None

    def require(self, operation: str) -> RequestMatch:
        """Return the bound match or raise NotBoundError."""
        if self._match is None:
            raise NotBoundError(operation)
        return self._match
