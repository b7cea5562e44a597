"""Field existence checks for client-supplied field lists."""

from __future__ import annotations

import dataclasses
from functools import lru_cache
from typing import Any

from pydantic import BaseModel

from src.exceptions import InvalidFieldsException


def _shape_type(shape: Any) -> type:
    return shape if isinstance(shape, type) else type(shape)


@lru_cache(maxsize=None)
def _member_index(shape_type: type) -> dict[str, str]:
    if issubclass(shape_type, BaseModel):
        names = list(shape_type.model_fields)
    elif dataclasses.is_dataclass(shape_type):
        names = [f.name for f in dataclasses.fields(shape_type)]
    else:
        raise TypeError(f"{shape_type.__name__} is neither a pydantic model nor a dataclass")
    return {name.casefold(): name for name in names}


def field_names(shape: Any) -> tuple[str, ...]:
    """Declared member names of a pydantic model or dataclass, in declaration order."""
    return tuple(_member_index(_shape_type(shape)).values())


def split_field_list(fields: str | None) -> list[str]:
    """Split a comma-separated field list into trimmed tokens; blank input gives []."""
    if fields is None or not fields.strip():
        return []
    return [token.strip() for token in fields.split(",")]


def resolve_field_name(shape: Any, token: str) -> str | None:
    """Case-insensitively match ``token`` to a declared member name."""
    return _member_index(_shape_type(shape)).get(token.strip().casefold())


def has_properties(shape: Any, fields: str | None) -> bool:
    """True when every token of ``fields`` names a member of ``shape``.

    An empty or absent list means "all fields" and is always valid.
    """
    return all(resolve_field_name(shape, token) is not None for token in split_field_list(fields))


def require_properties(shape: Any, fields: str | None) -> None:
    """Raise ``InvalidFieldsException`` unless ``has_properties(shape, fields)``."""
    if not has_properties(shape, fields):
        unknown = [token for token in split_field_list(fields) if resolve_field_name(shape, token) is None]
        raise InvalidFieldsException(
            f"Unknown field(s) requested for {_shape_type(shape).__name__}",
            details=[{"field": "fields", "message": f"Unknown field '{token}'"} for token in unknown],
        )
