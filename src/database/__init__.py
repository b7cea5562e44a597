from src.database.base import Base, UUIDPrimaryKeyMixin
from src.database.engine import async_session, engine
from src.database.session import get_db

__all__ = [
    "Base",
    "UUIDPrimaryKeyMixin",
    "async_session",
    "engine",
    "get_db",
]
