# Import all models so SQLAlchemy metadata is populated before create_all
from src.models.author import Author
from src.models.book import Book
from src.models.enums import ShapePair, SortDirection

__all__ = [
    "Author",
    "Book",
    "ShapePair",
    "SortDirection",
]
