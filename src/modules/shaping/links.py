"""Hypermedia link construction.

Links are resolved from *route names* through a resolver callable so the
ordering and contents of a link set can be decided here without knowing the
web framework. A resolver must raise ``LinkResolutionError`` when a route
cannot be built; links are never silently dropped.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict

from src.modules.shaping.constants import (
    COLLECTION_VALUE_KEY,
    LINKS_KEY,
    PAGE_NUMBER_PARAM,
    REL_NEXT_PAGE,
    REL_PREVIOUS_PAGE,
    REL_SELF,
)
from src.modules.shaping.paging import PagedList

UrlResolver = Callable[[str, Mapping[str, Any], Mapping[str, Any]], str]


class Link(BaseModel):
    model_config = ConfigDict(frozen=True)

    href: str
    rel: str
    method: str


class LinkBuilder:
    def __init__(self, resolve: UrlResolver) -> None:
        self._resolve = resolve

    def href(
        self,
        route_name: str,
        path_params: Mapping[str, Any] | None = None,
        query: Mapping[str, Any] | None = None,
    ) -> str:
        clean_query = {key: value for key, value in (query or {}).items() if value is not None}
        return self._resolve(route_name, dict(path_params or {}), clean_query)

    def link(
        self,
        route_name: str,
        rel: str,
        method: str = "GET",
        path_params: Mapping[str, Any] | None = None,
        query: Mapping[str, Any] | None = None,
    ) -> Link:
        return Link(href=self.href(route_name, path_params, query), rel=rel, method=method)


def with_page(query: Mapping[str, Any], page_number: int, page_param: str = PAGE_NUMBER_PARAM) -> dict[str, Any]:
    """Copy of ``query`` with only the page number replaced."""
    adjusted = dict(query)
    adjusted[page_param] = page_number
    return adjusted


def page_hrefs(
    builder: LinkBuilder,
    route_name: str,
    query: Mapping[str, Any],
    paged: PagedList,
    page_param: str = PAGE_NUMBER_PARAM,
    path_params: Mapping[str, Any] | None = None,
) -> tuple[str | None, str | None]:
    """(previous, next) page URIs, None where no such page exists."""
    previous_href = None
    next_href = None
    if paged.has_previous:
        previous_href = builder.href(
            route_name, path_params, with_page(query, paged.current_page - 1, page_param)
        )
    if paged.has_next:
        next_href = builder.href(
            route_name, path_params, with_page(query, paged.current_page + 1, page_param)
        )
    return previous_href, next_href


def paged_collection_links(
    builder: LinkBuilder,
    route_name: str,
    query: Mapping[str, Any],
    paged: PagedList,
    page_param: str = PAGE_NUMBER_PARAM,
    path_params: Mapping[str, Any] | None = None,
) -> list[Link]:
    """``self``, then ``nextPage`` and ``previousPage`` when those pages exist."""
    links = [
        builder.link(
            route_name, REL_SELF, "GET", path_params, with_page(query, paged.current_page, page_param)
        )
    ]
    if paged.has_next:
        links.append(
            builder.link(
                route_name,
                REL_NEXT_PAGE,
                "GET",
                path_params,
                with_page(query, paged.current_page + 1, page_param),
            )
        )
    if paged.has_previous:
        links.append(
            builder.link(
                route_name,
                REL_PREVIOUS_PAGE,
                "GET",
                path_params,
                with_page(query, paged.current_page - 1, page_param),
            )
        )
    return links


def with_links(shaped: Mapping[str, Any], links: Sequence[Link]) -> dict[str, Any]:
    """New dict: the shaped members followed by a ``links`` entry."""
    linked = dict(shaped)
    linked[LINKS_KEY] = [link.model_dump() for link in links]
    return linked


def linked_collection(value: Sequence[Mapping[str, Any]], links: Sequence[Link]) -> dict[str, Any]:
    return {
        COLLECTION_VALUE_KEY: list(value),
        LINKS_KEY: [link.model_dump() for link in links],
    }
