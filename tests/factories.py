"""Entity builders shared by the test modules."""

import uuid
from datetime import date

from src.config import settings
from src.models.author import Author
from src.models.book import Book

HATEOAS = settings.hateoas_media_type
TODAY = date(2026, 1, 1)


def make_author(
    first_name: str = "Stephen",
    last_name: str = "King",
    date_of_birth: date = date(1947, 9, 21),
    genre: str = "Horror",
    author_id: uuid.UUID | None = None,
) -> Author:
    return Author(
        id=author_id or uuid.uuid4(),
        first_name=first_name,
        last_name=last_name,
        date_of_birth=date_of_birth,
        genre=genre,
    )


def make_book(
    author_id: uuid.UUID,
    title: str = "The Shining",
    description: str | None = "A caretaker's family winters alone in a haunted hotel.",
    book_id: uuid.UUID | None = None,
) -> Book:
    return Book(id=book_id or uuid.uuid4(), title=title, description=description, author_id=author_id)
