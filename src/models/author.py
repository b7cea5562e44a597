"""Author model: the aggregate root of the library catalogue."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.database.base import Base, UUIDPrimaryKeyMixin

if TYPE_CHECKING:
    from src.models.book import Book


class Author(UUIDPrimaryKeyMixin, Base):
    __tablename__ = "authors"

    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    genre: Mapped[str] = mapped_column(String(50), nullable=False)

    # Relationships
    books: Mapped[list[Book]] = relationship(
        "Book", back_populates="author", cascade="all, delete-orphan", order_by="Book.title"
    )
