"""FastAPI adapters for the shaping core: URL resolution, registry, negotiation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fastapi import Depends, Header, Request
from starlette.routing import NoMatchFound

from src.config import Settings, get_settings
from src.exceptions import ConfigurationError, LinkResolutionError
from src.modules.shaping.links import LinkBuilder, UrlResolver
from src.modules.shaping.negotiation import wants_hypermedia
from src.modules.shaping.property_mapping import PropertyMappingRegistry


def request_url_resolver(request: Request) -> UrlResolver:
    """Resolve route names against the application serving ``request``."""

    def resolve(route_name: str, path_params: Mapping[str, Any], query: Mapping[str, Any]) -> str:
        try:
            url = request.url_for(route_name, **{key: str(value) for key, value in path_params.items()})
        except NoMatchFound as exc:
            raise LinkResolutionError(
                f"Cannot build a link to route '{route_name}' with parameters {sorted(path_params)}"
            ) from exc
        if query:
            url = url.include_query_params(**query)
        return str(url)

    return resolve


def get_link_builder(request: Request) -> LinkBuilder:
    return LinkBuilder(request_url_resolver(request))


def get_property_mappings(request: Request) -> PropertyMappingRegistry:
    registry = getattr(request.app.state, "property_mappings", None)
    if registry is None:
        raise ConfigurationError("Property mapping registry was not initialised at start-up")
    return registry


def hypermedia_requested(
    accept: str | None = Header(None),
    cfg: Settings = Depends(get_settings),
) -> bool:
    """True when the client negotiated the hypermedia media type."""
    return wants_hypermedia(accept, cfg.hateoas_media_type)
