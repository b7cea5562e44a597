"""Projects DTOs down to the fields a client asked for."""

from __future__ import annotations

import copy
from collections.abc import Iterable
from typing import Any

from src.modules.shaping.field_validation import field_names, resolve_field_name, split_field_list


def shape(source: Any, fields: str | None = None) -> dict[str, Any]:
    """Return a new ordered dict holding the requested members of ``source``.

    Without ``fields`` every declared member is included in declaration order;
    otherwise members appear in the order the client listed them. Callers must
    validate ``fields`` with ``has_properties`` first: an unknown name raises
    ``KeyError``.
    """
    tokens = split_field_list(fields)
    if not tokens:
        names = list(field_names(source))
    else:
        names = []
        for token in tokens:
            name = resolve_field_name(source, token)
            if name is None:
                raise KeyError(f"'{token}' is not a member of {type(source).__name__}")
            names.append(name)

    return {name: copy.deepcopy(getattr(source, name)) for name in names}


def shape_many(sources: Iterable[Any], fields: str | None = None) -> list[dict[str, Any]]:
    return [shape(source, fields) for source in sources]
