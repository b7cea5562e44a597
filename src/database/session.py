import logging
from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.database.engine import async_session

logger = logging.getLogger(__name__)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding one session per request.

    Commits when the endpoint returns normally, rolls back on any exception.
    """
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception as exc:
            logger.debug("Rolling back session after %s", type(exc).__name__)
            await session.rollback()
            raise
