"""Conversions between author entities and DTOs, and the author sort mapping."""

from __future__ import annotations

import uuid
from collections.abc import Callable, Iterable
from datetime import date

from src.models.author import Author
from src.modules.author.schemas import AuthorDto, AuthorForCreation
from src.modules.book.mapping import book_from_creation
from src.modules.shaping.property_mapping import PropertyMappingValue

AgeCalculator = Callable[[date], int]

# Public AuthorDto sort fields -> Author columns. Age orders opposite to date of birth.
AUTHOR_PROPERTY_MAPPING: dict[str, PropertyMappingValue] = {
    "Id": PropertyMappingValue(("id",)),
    "Genre": PropertyMappingValue(("genre",)),
    "Age": PropertyMappingValue(("date_of_birth",), revert=True),
    "Name": PropertyMappingValue(("first_name", "last_name")),
}


def current_age(date_of_birth: date, today: date | None = None) -> int:
    """Completed years since ``date_of_birth``.

    A birthday counts once its month/day is reached, so 29 February birthdays
    roll over on 1 March in non-leap years.
    """
    today = today or date.today()
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


def get_age_calculator() -> AgeCalculator:
    """FastAPI dependency; override to plug in another age rule."""
    return current_age


def author_to_dto(author: Author, age_of: AgeCalculator = current_age) -> AuthorDto:
    return AuthorDto(
        id=author.id,
        name=f"{author.first_name} {author.last_name}",
        age=age_of(author.date_of_birth),
        genre=author.genre,
    )


def authors_to_dtos(authors: Iterable[Author], age_of: AgeCalculator = current_age) -> list[AuthorDto]:
    return [author_to_dto(author, age_of) for author in authors]


def author_from_creation(data: AuthorForCreation) -> Author:
    author_id = uuid.uuid4()
    return Author(
        id=author_id,
        first_name=data.first_name,
        last_name=data.last_name,
        date_of_birth=data.date_of_birth,
        genre=data.genre,
        books=[book_from_creation(book, author_id) for book in data.books],
    )
