"""Pydantic request/response schemas for the book module."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, Field, model_validator

from src.modules.book.constants import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH


class BookDto(BaseModel):
    id: uuid.UUID
    title: str
    description: str | None
    author_id: uuid.UUID


class BookForManipulation(BaseModel):
    """Fields shared by create and full-update payloads."""

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(None, max_length=DESCRIPTION_MAX_LENGTH)

    @model_validator(mode="after")
    def _description_differs_from_title(self) -> BookForManipulation:
        if self.description is not None and self.description == self.title:
            raise ValueError("The provided description should be different from the title.")
        return self


class BookForCreation(BookForManipulation):
    pass


class BookForUpdate(BookForManipulation):
    description: str = Field(..., min_length=1, max_length=DESCRIPTION_MAX_LENGTH)


class BookPartialUpdate(BaseModel):
    """PATCH payload: only the members the client sends are applied."""

    title: str | None = None
    description: str | None = None
