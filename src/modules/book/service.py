"""Book service: books owned by an author."""

from __future__ import annotations

import logging
import uuid

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.exceptions import NotFoundException, ValidationException
from src.models.author import Author
from src.models.book import Book
from src.modules.book.mapping import book_from_creation, book_update_state
from src.modules.book.schemas import BookForCreation, BookForUpdate, BookPartialUpdate

logger = logging.getLogger(__name__)


class BookService:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_books_for_author(self, author_id: uuid.UUID) -> list[Book]:
        await self._ensure_author_exists(author_id)
        result = await self._session.execute(
            select(Book).where(Book.author_id == author_id).order_by(Book.title)
        )
        return list(result.scalars().all())

    async def get_book_for_author(self, author_id: uuid.UUID, book_id: uuid.UUID) -> Book:
        await self._ensure_author_exists(author_id)
        result = await self._session.execute(
            select(Book).where(Book.author_id == author_id, Book.id == book_id)
        )
        book = result.scalar_one_or_none()
        if book is None:
            raise NotFoundException(f"Book {book_id} not found for author {author_id}")
        return book

    async def create_book_for_author(self, author_id: uuid.UUID, data: BookForCreation) -> Book:
        await self._ensure_author_exists(author_id)
        book = book_from_creation(data, author_id)
        self._session.add(book)
        await self._session.flush()
        logger.info("Book %s created for author %s", book.id, author_id)
        return book

    async def update_book_for_author(
        self, author_id: uuid.UUID, book_id: uuid.UUID, data: BookForUpdate
    ) -> Book:
        book = await self.get_book_for_author(author_id, book_id)
        book.title = data.title
        book.description = data.description
        await self._session.flush()
        return book

    async def partially_update_book_for_author(
        self, author_id: uuid.UUID, book_id: uuid.UUID, data: BookPartialUpdate
    ) -> Book:
        book = await self.get_book_for_author(author_id, book_id)
        merged = {**book_update_state(book), **data.model_dump(exclude_unset=True)}
        try:
            update = BookForUpdate.model_validate(merged)
        except ValidationError as exc:
            details = [
                {"field": ".".join(str(loc) for loc in err.get("loc", [])), "message": err.get("msg", "")}
                for err in exc.errors()
            ]
            raise ValidationException("Patched book is invalid", details=details) from exc

        book.title = update.title
        book.description = update.description
        await self._session.flush()
        return book

    async def delete_book_for_author(self, author_id: uuid.UUID, book_id: uuid.UUID) -> None:
        book = await self.get_book_for_author(author_id, book_id)
        await self._session.delete(book)
        await self._session.flush()
        logger.info("Book %s of author %s deleted", book_id, author_id)

    async def _ensure_author_exists(self, author_id: uuid.UUID) -> None:
        result = await self._session.execute(select(Author.id).where(Author.id == author_id))
        if result.scalar_one_or_none() is None:
            raise NotFoundException(f"Author {author_id} not found")
