"""Pydantic request/response schemas for the author module."""

from __future__ import annotations

import uuid
from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from src.modules.author.constants import DEFAULT_ORDER_BY, GENRE_PARAM, SEARCH_QUERY_PARAM
from src.modules.book.schemas import BookForCreation
from src.modules.shaping.constants import (
    FIELDS_PARAM,
    ORDER_BY_PARAM,
    PAGE_NUMBER_PARAM,
    PAGE_SIZE_PARAM,
)


class AuthorDto(BaseModel):
    """Public representation of an author; the shape clients select fields from."""

    id: uuid.UUID
    name: str
    age: int
    genre: str


class AuthorForCreation(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    date_of_birth: date
    genre: str = Field(..., min_length=1, max_length=50)
    books: list[BookForCreation] = Field(default_factory=list)


class AuthorsResourceParameters(BaseModel):
    """Query parameters of the author list, page size already clamped."""

    model_config = ConfigDict(frozen=True)

    page_number: int = Field(1, ge=1)
    page_size: int = Field(10, ge=1)
    genre: str | None = None
    search_query: str | None = None
    order_by: str = DEFAULT_ORDER_BY
    fields: str | None = None

    def to_query(self, page_number: int | None = None) -> dict[str, str | int | None]:
        """The parameters under their wire names, optionally on another page."""
        return {
            FIELDS_PARAM: self.fields,
            ORDER_BY_PARAM: self.order_by,
            SEARCH_QUERY_PARAM: self.search_query,
            GENRE_PARAM: self.genre,
            PAGE_NUMBER_PARAM: self.page_number if page_number is None else page_number,
            PAGE_SIZE_PARAM: self.page_size,
        }
