from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.database.base import Base, UUIDPrimaryKeyMixin

if TYPE_CHECKING:
    from src.models.author import Author


class Book(UUIDPrimaryKeyMixin, Base):
    __tablename__ = "books"

    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(String(500))
    author_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("authors.id", ondelete="CASCADE"), nullable=False
    )

    # Relationships
    author: Mapped[Author] = relationship("Author", back_populates="books")

    __table_args__ = (Index("ix_books_author_id", "author_id"),)
