"""Hypermedia links for books and the per-author book list."""

from __future__ import annotations

import uuid

from src.modules.author.constants import GET_AUTHOR
from src.modules.book.constants import (
    DELETE_BOOK_FOR_AUTHOR,
    GET_BOOK_FOR_AUTHOR,
    GET_BOOKS_FOR_AUTHOR,
    PARTIALLY_UPDATE_BOOK_FOR_AUTHOR,
    REL_AUTHOR,
    REL_DELETE_BOOK,
    REL_PARTIALLY_UPDATE_BOOK,
    REL_UPDATE_BOOK,
    UPDATE_BOOK_FOR_AUTHOR,
)
from src.modules.shaping.constants import FIELDS_PARAM, REL_SELF
from src.modules.shaping.links import Link, LinkBuilder


def book_links(
    builder: LinkBuilder, author_id: uuid.UUID, book_id: uuid.UUID, fields: str | None = None
) -> list[Link]:
    path = {"author_id": author_id, "book_id": book_id}
    return [
        builder.link(GET_BOOK_FOR_AUTHOR, REL_SELF, "GET", path, {FIELDS_PARAM: fields or None}),
        builder.link(DELETE_BOOK_FOR_AUTHOR, REL_DELETE_BOOK, "DELETE", path),
        builder.link(UPDATE_BOOK_FOR_AUTHOR, REL_UPDATE_BOOK, "PUT", path),
        builder.link(PARTIALLY_UPDATE_BOOK_FOR_AUTHOR, REL_PARTIALLY_UPDATE_BOOK, "PATCH", path),
        builder.link(GET_AUTHOR, REL_AUTHOR, "GET", {"author_id": author_id}),
    ]


def books_collection_links(builder: LinkBuilder, author_id: uuid.UUID, fields: str | None = None) -> list[Link]:
    return [
        builder.link(GET_BOOKS_FOR_AUTHOR, REL_SELF, "GET", {"author_id": author_id}, {FIELDS_PARAM: fields or None}),
    ]
