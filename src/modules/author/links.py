"""Hypermedia links for authors and the author list."""

from __future__ import annotations

import uuid

from src.modules.author.constants import (
    DELETE_AUTHOR,
    GET_AUTHOR,
    GET_AUTHORS,
    REL_BOOKS,
    REL_CREATE_BOOK_FOR_AUTHOR,
    REL_DELETE_AUTHOR,
)
from src.modules.author.schemas import AuthorsResourceParameters
from src.modules.book.constants import CREATE_BOOK_FOR_AUTHOR, GET_BOOKS_FOR_AUTHOR
from src.modules.shaping.constants import FIELDS_PARAM, REL_SELF
from src.modules.shaping.links import Link, LinkBuilder, page_hrefs, paged_collection_links
from src.modules.shaping.paging import PagedList


def author_links(builder: LinkBuilder, author_id: uuid.UUID, fields: str | None = None) -> list[Link]:
    path = {"author_id": author_id}
    return [
        builder.link(GET_AUTHOR, REL_SELF, "GET", path, {FIELDS_PARAM: fields or None}),
        builder.link(DELETE_AUTHOR, REL_DELETE_AUTHOR, "DELETE", path),
        builder.link(CREATE_BOOK_FOR_AUTHOR, REL_CREATE_BOOK_FOR_AUTHOR, "POST", path),
        builder.link(GET_BOOKS_FOR_AUTHOR, REL_BOOKS, "GET", path),
    ]


def authors_collection_links(
    builder: LinkBuilder, params: AuthorsResourceParameters, paged: PagedList
) -> list[Link]:
    return paged_collection_links(builder, GET_AUTHORS, params.to_query(), paged)


def authors_page_hrefs(
    builder: LinkBuilder, params: AuthorsResourceParameters, paged: PagedList
) -> tuple[str | None, str | None]:
    return page_hrefs(builder, GET_AUTHORS, params.to_query(), paged)
