"""Tests for the demo data seeder."""

from src.seed import build_seed_authors
from src.seed_data.authors import AUTHORS


def test_seed_payloads_validate_and_link_books() -> None:
    authors = build_seed_authors()

    assert len(authors) == len(AUTHORS)
    assert len({author.id for author in authors}) == len(authors)
    for author in authors:
        assert author.books
        assert all(book.author_id == author.id for book in author.books)


def test_seed_authors_are_fresh_on_every_build() -> None:
    first = {author.id for author in build_seed_authors()}
    second = {author.id for author in build_seed_authors()}

    assert first.isdisjoint(second)
