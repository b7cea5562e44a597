"""Turns storage sort keys into SQLAlchemy ORDER BY clauses."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy.orm import InstrumentedAttribute

from src.exceptions import ConfigurationError
from src.modules.shaping.property_mapping import SortKey


def order_by_clauses(entity: type, sort_keys: Sequence[SortKey]) -> list[Any]:
    """ORDER BY clauses for ``entity``, primary key of the sort first.

    A mapping that names a column the entity does not have is a registration
    defect and raises ``ConfigurationError``.
    """
    clauses = []
    for key in sort_keys:
        column = getattr(entity, key.field, None)
        if not isinstance(column, InstrumentedAttribute):
            raise ConfigurationError(f"{entity.__name__} has no column '{key.field}' to sort by")
        clauses.append(column.desc() if key.descending else column.asc())
    return clauses
