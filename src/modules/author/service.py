"""Author service: filtered, sorted and paged reads plus create/delete."""

from __future__ import annotations

import logging
import re
import uuid
from collections.abc import Sequence

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.exceptions import NotFoundException
from src.models.author import Author
from src.modules.author.mapping import author_from_creation
from src.modules.author.schemas import AuthorForCreation
from src.modules.shaping.paging import PagedList, page_offset
from src.modules.shaping.property_mapping import SortKey
from src.modules.shaping.sorting import order_by_clauses

logger = logging.getLogger(__name__)


def _author_filters(genre: str | None, search_query: str | None) -> list:
    filters = []
    if genre is not None and genre.strip():
        filters.append(func.lower(Author.genre) == genre.strip().lower())
    if search_query is not None and search_query.strip():
        escaped = re.sub(r"([%_\\])", r"\\\1", search_query.strip())
        like_pattern = f"%{escaped}%"
        filters.append(
            or_(
                Author.genre.ilike(like_pattern),
                Author.first_name.ilike(like_pattern),
                Author.last_name.ilike(like_pattern),
            )
        )
    return filters


class AuthorService:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_authors(
        self,
        *,
        genre: str | None = None,
        search_query: str | None = None,
        sort_keys: Sequence[SortKey] = (),
        page_number: int = 1,
        page_size: int = 10,
    ) -> PagedList[Author]:
        filters = _author_filters(genre, search_query)

        count_stmt = select(func.count()).select_from(Author).where(*filters)
        total = (await self._session.execute(count_stmt)).scalar_one()

        stmt = (
            select(Author)
            .where(*filters)
            .order_by(*order_by_clauses(Author, sort_keys))
            .offset(page_offset(page_number, page_size))
            .limit(page_size)
        )
        result = await self._session.execute(stmt)
        return PagedList(
            items=tuple(result.scalars().all()),
            total_count=total,
            current_page=page_number,
            page_size=page_size,
        )

    async def get_author(self, author_id: uuid.UUID) -> Author:
        result = await self._session.execute(select(Author).where(Author.id == author_id))
        author = result.scalar_one_or_none()
        if author is None:
            raise NotFoundException(f"Author {author_id} not found")
        return author

    async def get_authors_by_ids(self, author_ids: Sequence[uuid.UUID]) -> list[Author]:
        """Authors for ``author_ids`` in the requested order; missing ids are skipped."""
        result = await self._session.execute(select(Author).where(Author.id.in_(author_ids)))
        by_id = {author.id: author for author in result.scalars().all()}
        return [by_id[author_id] for author_id in author_ids if author_id in by_id]

    async def create_author(self, data: AuthorForCreation) -> Author:
        author = author_from_creation(data)
        self._session.add(author)
        await self._session.flush()
        logger.info("Author %s created with %d book(s)", author.id, len(data.books))
        return author

    async def create_authors(self, items: Sequence[AuthorForCreation]) -> list[Author]:
        authors = [author_from_creation(data) for data in items]
        self._session.add_all(authors)
        await self._session.flush()
        logger.info("Created author collection of %d author(s)", len(authors))
        return authors

    async def delete_author(self, author_id: uuid.UUID) -> None:
        author = await self.get_author(author_id)
        await self._session.delete(author)
        await self._session.flush()
        logger.info("Author %s deleted", author_id)
