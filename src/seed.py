"""Database seeder: creates the schema and loads the demo authors and books.

Run via: python -m src.seed
"""

import asyncio
import logging

from sqlalchemy import delete

from src.database.base import Base
from src.database.engine import async_session, engine
from src.models import Author, Book
from src.modules.author.mapping import author_from_creation
from src.modules.author.schemas import AuthorForCreation
from src.seed_data.authors import AUTHORS

logger = logging.getLogger(__name__)


def build_seed_authors() -> list[Author]:
    """Validate the seed payloads and turn them into fresh entities."""
    return [author_from_creation(AuthorForCreation.model_validate(entry)) for entry in AUTHORS]


async def seed() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    authors = build_seed_authors()
    async with async_session() as session:
        # Reset to a known state on every run
        await session.execute(delete(Book))
        await session.execute(delete(Author))
        session.add_all(authors)
        await session.commit()

    logger.info("Seeded %d authors and %d books", len(authors), sum(len(a.books) for a in authors))
    await engine.dispose()


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed())


if __name__ == "__main__":
    main()
