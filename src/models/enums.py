import enum


class ShapePair(str, enum.Enum):
    """(public shape, internal shape) pairs that carry a property mapping."""

    AUTHOR = "author_dto:author"


class SortDirection(str, enum.Enum):
    ASC = "asc"
    DESC = "desc"
