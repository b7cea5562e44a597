"""Response assembly shared by the resource routers."""

from __future__ import annotations

import json
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from src.modules.shaping.paging import PagedList
from src.schemas.responses import PaginationMeta


def shaped_response(
    content: Any,
    *,
    hypermedia: bool,
    media_type: str,
    status_code: int = 200,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Serialize shaped content, labelled with the vendor media type in hypermedia mode."""
    return JSONResponse(
        content=jsonable_encoder(content),
        status_code=status_code,
        media_type=media_type if hypermedia else "application/json",
        headers=headers,
    )


def pagination_header_value(
    paged: PagedList,
    *,
    previous_page_link: str | None = None,
    next_page_link: str | None = None,
    include_page_links: bool = True,
) -> str:
    """JSON paging metadata for the pagination response header.

    In hypermedia mode the navigation links live in the body, so the header
    carries only the counters.
    """
    meta = PaginationMeta(
        total_count=paged.total_count,
        page_size=paged.page_size,
        current_page=paged.current_page,
        total_pages=paged.total_pages,
        previous_page_link=previous_page_link,
        next_page_link=next_page_link,
    )
    exclude = None if include_page_links else {"previous_page_link", "next_page_link"}
    return json.dumps(meta.model_dump(by_alias=True, exclude=exclude))
