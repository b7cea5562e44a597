"""Tests for BookService."""

import uuid
from unittest.mock import MagicMock

import pytest

from src.exceptions import NotFoundException, ValidationException
from src.modules.book.schemas import BookForCreation, BookForUpdate, BookPartialUpdate
from src.modules.book.service import BookService
from tests.factories import make_book


def _single_result(value) -> MagicMock:
    result = MagicMock()
    result.scalar_one_or_none.return_value = value
    return result


def _rows_result(rows: list) -> MagicMock:
    result = MagicMock()
    result.scalars.return_value.all.return_value = rows
    return result


@pytest.fixture
def book_service(mock_session):
    return BookService(mock_session)


@pytest.fixture
def author_id():
    return uuid.uuid4()


@pytest.fixture
def book(author_id):
    return make_book(author_id, title="The Stand", description="A plague wipes out most of humanity.")


class TestReads:
    @pytest.mark.asyncio
    async def test_list_books(self, book_service, mock_session, author_id, book) -> None:
        mock_session.execute.side_effect = [_single_result(author_id), _rows_result([book])]

        assert await book_service.list_books_for_author(author_id) == [book]

    @pytest.mark.asyncio
    async def test_unknown_author_is_not_found(self, book_service, mock_session) -> None:
        mock_session.execute.return_value = _single_result(None)

        with pytest.raises(NotFoundException, match="Author"):
            await book_service.list_books_for_author(uuid.uuid4())
        assert mock_session.execute.await_count == 1

    @pytest.mark.asyncio
    async def test_unknown_book_is_not_found(self, book_service, mock_session, author_id) -> None:
        mock_session.execute.side_effect = [_single_result(author_id), _single_result(None)]

        with pytest.raises(NotFoundException, match="Book"):
            await book_service.get_book_for_author(author_id, uuid.uuid4())


class TestWrites:
    @pytest.mark.asyncio
    async def test_create_book(self, book_service, mock_session, author_id) -> None:
        mock_session.execute.return_value = _single_result(author_id)

        book = await book_service.create_book_for_author(author_id, BookForCreation(title="It"))

        mock_session.add.assert_called_once_with(book)
        mock_session.flush.assert_awaited_once()
        assert book.author_id == author_id
        assert book.description is None

    @pytest.mark.asyncio
    async def test_update_replaces_both_members(self, book_service, mock_session, author_id, book) -> None:
        mock_session.execute.side_effect = [_single_result(author_id), _single_result(book)]

        await book_service.update_book_for_author(
            author_id, book.id, BookForUpdate(title="The Stand: Complete", description="Uncut edition.")
        )

        assert (book.title, book.description) == ("The Stand: Complete", "Uncut edition.")
        mock_session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_partial_update_keeps_unsent_members(self, book_service, mock_session, author_id, book) -> None:
        mock_session.execute.side_effect = [_single_result(author_id), _single_result(book)]

        await book_service.partially_update_book_for_author(
            author_id, book.id, BookPartialUpdate(description="Captain Trips.")
        )

        assert book.title == "The Stand"
        assert book.description == "Captain Trips."

    @pytest.mark.asyncio
    async def test_partial_update_rejects_description_equal_to_title(
        self, book_service, mock_session, author_id, book
    ) -> None:
        mock_session.execute.side_effect = [_single_result(author_id), _single_result(book)]

        with pytest.raises(ValidationException) as exc_info:
            await book_service.partially_update_book_for_author(
                author_id, book.id, BookPartialUpdate(title="A plague wipes out most of humanity.")
            )

        assert exc_info.value.details
        assert book.title == "The Stand"
        mock_session.flush.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_book(self, book_service, mock_session, author_id, book) -> None:
        mock_session.execute.side_effect = [_single_result(author_id), _single_result(book)]

        await book_service.delete_book_for_author(author_id, book.id)

        mock_session.delete.assert_awaited_once_with(book)


def test_description_must_differ_from_title() -> None:
    with pytest.raises(ValueError, match="different from the title"):
        BookForCreation(title="Same", description="Same")
