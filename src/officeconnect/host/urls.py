"""Absolute URL generation for plugin images and named routes."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, urlencode

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, sort_keys=True, separators=(",", ":"))


class RouteLinkBuilder:
    """LinkBuilderService over a table of named route templates.

    Route templates are paths relative to the host base URL with ``{name}``
    placeholders, e.g. ``/apps/officeconnect/{fileId}``. Parameters that do
    not fill a placeholder are appended as a query string in key order, so
    the same parameters always yield the same URL.
    """

    def __init__(self, base_url: str, routes: Mapping[str, str] | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.routes: dict[str, str] = dict(routes or {})

    def add_route(self, name: str, template: str) -> None:
        self.routes[name] = template

    def image_path(self, app: str, image: str) -> str:
        return f"/apps/{app}/img/{image}"

    def get_absolute_url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def link_to_route(self, route: str, params: Mapping[str, Any]) -> str:
        """Return the host-relative path for *route*.

        Raises:
            KeyError: If the route is not registered.
            ValueError: If a path placeholder has no matching parameter.
        """
        template = self.routes[route]
        remaining = dict(params)

        def _fill(match: re.Match) -> str:
            key = match.group(1)
            if key not in remaining:
                raise ValueError(f"Missing parameter '{key}' for route '{route}'")
            return quote(_stringify(remaining.pop(key)), safe="")

        path = _PLACEHOLDER.sub(_fill, template)
        if remaining:
            query = urlencode([(k, _stringify(remaining[k])) for k in sorted(remaining)])
            path = f"{path}?{query}"
        return path

    def link_to_route_absolute(self, route: str, params: Mapping[str, Any]) -> str:
        return self.get_absolute_url(self.link_to_route(route, params))
