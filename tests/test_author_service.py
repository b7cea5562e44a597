"""Tests for AuthorService and the author mapping helpers."""

import uuid
from datetime import date
from unittest.mock import MagicMock

import pytest

from src.exceptions import NotFoundException
from src.models.author import Author
from src.modules.author.mapping import author_to_dto, current_age
from src.modules.author.schemas import AuthorForCreation
from src.modules.author.service import AuthorService
from src.modules.book.schemas import BookForCreation
from src.modules.shaping.property_mapping import SortKey
from tests.factories import TODAY, make_author


def _count_result(total: int) -> MagicMock:
    result = MagicMock()
    result.scalar_one.return_value = total
    return result


def _rows_result(rows: list) -> MagicMock:
    result = MagicMock()
    result.scalars.return_value.all.return_value = rows
    return result


def _single_result(value) -> MagicMock:
    result = MagicMock()
    result.scalar_one_or_none.return_value = value
    return result


@pytest.fixture
def author_service(mock_session):
    return AuthorService(mock_session)


class TestListAuthors:
    @pytest.mark.asyncio
    async def test_returns_page_with_total(self, author_service, mock_session) -> None:
        authors = [make_author(), make_author(first_name="Neil", last_name="Gaiman")]
        mock_session.execute.side_effect = [_count_result(12), _rows_result(authors)]

        paged = await author_service.list_authors(page_number=2, page_size=10)

        assert paged.items == tuple(authors)
        assert paged.total_count == 12
        assert paged.current_page == 2
        assert paged.total_pages == 2
        assert paged.has_previous is True
        assert paged.has_next is False

    @pytest.mark.asyncio
    async def test_sorts_and_windows_the_query(self, author_service, mock_session) -> None:
        mock_session.execute.side_effect = [_count_result(25), _rows_result([])]

        await author_service.list_authors(
            sort_keys=[
                SortKey("date_of_birth", descending=False),
                SortKey("first_name", descending=True),
            ],
            page_number=3,
            page_size=10,
        )

        stmt = mock_session.execute.await_args_list[1].args[0]
        sql = str(stmt.compile(compile_kwargs={"literal_binds": True}))
        assert "ORDER BY authors.date_of_birth ASC, authors.first_name DESC" in sql
        assert "LIMIT 10 OFFSET 20" in sql

    @pytest.mark.asyncio
    async def test_genre_filter_is_case_insensitive_exact_match(self, author_service, mock_session) -> None:
        mock_session.execute.side_effect = [_count_result(0), _rows_result([])]

        await author_service.list_authors(genre="  Horror ")

        count_stmt = mock_session.execute.await_args_list[0].args[0]
        compiled = count_stmt.compile()
        assert "lower(authors.genre) =" in str(compiled)
        assert "horror" in compiled.params.values()

    @pytest.mark.asyncio
    async def test_search_escapes_like_wildcards(self, author_service, mock_session) -> None:
        mock_session.execute.side_effect = [_count_result(0), _rows_result([])]

        await author_service.list_authors(search_query="50%_off")

        stmt = mock_session.execute.await_args_list[1].args[0]
        compiled = stmt.compile()
        assert "authors.first_name" in str(compiled)
        assert "authors.last_name" in str(compiled)
        assert "%50\\%\\_off%" in compiled.params.values()

    @pytest.mark.asyncio
    async def test_blank_filters_are_ignored(self, author_service, mock_session) -> None:
        mock_session.execute.side_effect = [_count_result(0), _rows_result([])]

        await author_service.list_authors(genre=" ", search_query="")

        count_stmt = mock_session.execute.await_args_list[0].args[0]
        assert "WHERE" not in str(count_stmt)


class TestGetAuthor:
    @pytest.mark.asyncio
    async def test_found(self, author_service, mock_session) -> None:
        author = make_author()
        mock_session.execute.return_value = _single_result(author)

        assert await author_service.get_author(author.id) is author

    @pytest.mark.asyncio
    async def test_missing_raises_not_found(self, author_service, mock_session) -> None:
        mock_session.execute.return_value = _single_result(None)

        with pytest.raises(NotFoundException):
            await author_service.get_author(uuid.uuid4())

    @pytest.mark.asyncio
    async def test_by_ids_keeps_requested_order_and_skips_missing(self, author_service, mock_session) -> None:
        first, second = make_author(), make_author(first_name="George", last_name="RR Martin")
        mock_session.execute.return_value = _rows_result([first, second])

        found = await author_service.get_authors_by_ids([second.id, uuid.uuid4(), first.id])

        assert found == [second, first]


class TestCreateAndDelete:
    @pytest.mark.asyncio
    async def test_create_author_with_books(self, author_service, mock_session) -> None:
        data = AuthorForCreation(
            first_name="Douglas",
            last_name="Adams",
            date_of_birth=date(1952, 3, 11),
            genre="Science fiction",
            books=[BookForCreation(title="The Hitchhiker's Guide to the Galaxy")],
        )

        author = await author_service.create_author(data)

        mock_session.add.assert_called_once_with(author)
        mock_session.flush.assert_awaited_once()
        assert isinstance(author.id, uuid.UUID)
        assert [book.author_id for book in author.books] == [author.id]

    @pytest.mark.asyncio
    async def test_create_authors_adds_all(self, author_service, mock_session) -> None:
        payloads = [
            AuthorForCreation(first_name="Tom", last_name="Lanoye", date_of_birth=date(1958, 8, 27), genre="Various"),
            AuthorForCreation(first_name="James", last_name="Ellroy", date_of_birth=date(1948, 3, 4), genre="Thriller"),
        ]

        authors = await author_service.create_authors(payloads)

        mock_session.add_all.assert_called_once_with(authors)
        assert [a.last_name for a in authors] == ["Lanoye", "Ellroy"]
        assert len({a.id for a in authors}) == 2

    @pytest.mark.asyncio
    async def test_delete_author(self, author_service, mock_session) -> None:
        author = make_author()
        mock_session.execute.return_value = _single_result(author)

        await author_service.delete_author(author.id)

        mock_session.delete.assert_awaited_once_with(author)
        mock_session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_missing_author(self, author_service, mock_session) -> None:
        mock_session.execute.return_value = _single_result(None)

        with pytest.raises(NotFoundException):
            await author_service.delete_author(uuid.uuid4())
        mock_session.delete.assert_not_awaited()


class TestCurrentAge:
    def test_before_birthday(self) -> None:
        assert current_age(date(1947, 9, 21), today=date(2026, 9, 20)) == 78

    def test_on_birthday(self) -> None:
        assert current_age(date(1947, 9, 21), today=date(2026, 9, 21)) == 79

    def test_leap_day_birthday_counts_from_march_first(self) -> None:
        born = date(2000, 2, 29)
        assert current_age(born, today=date(2025, 2, 28)) == 24
        assert current_age(born, today=date(2025, 3, 1)) == 25
        assert current_age(born, today=date(2024, 2, 29)) == 24


def test_author_to_dto() -> None:
    author = make_author(first_name="Neil", last_name="Gaiman", date_of_birth=date(1960, 11, 10), genre="Fantasy")

    dto = author_to_dto(author, lambda dob: current_age(dob, today=TODAY))

    assert dto.id == author.id
    assert dto.name == "Neil Gaiman"
    assert dto.age == 65
    assert dto.genre == "Fantasy"
    assert isinstance(author, Author)
