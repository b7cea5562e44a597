"""Conversions between book entities and DTOs."""

from __future__ import annotations

import uuid
from collections.abc import Iterable

from src.models.book import Book
from src.modules.book.schemas import BookDto, BookForCreation


def book_to_dto(book: Book) -> BookDto:
    return BookDto(
        id=book.id,
        title=book.title,
        description=book.description,
        author_id=book.author_id,
    )


def books_to_dtos(books: Iterable[Book]) -> list[BookDto]:
    return [book_to_dto(book) for book in books]


def book_from_creation(data: BookForCreation, author_id: uuid.UUID | None = None) -> Book:
    return Book(
        id=uuid.uuid4(),
        title=data.title,
        description=data.description,
        author_id=author_id,
    )


def book_update_state(book: Book) -> dict:
    """Current updatable members of ``book``, the base a partial update is merged onto."""
    return {"title": book.title, "description": book.description}
