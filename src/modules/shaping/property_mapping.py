"""Property mapping: translates client-facing sort fields into storage fields.

A public field may fan out to several internal fields (``name`` sorts by first
name, then last name) and may be *reverted* when the public concept orders
opposite to the stored one (ascending ``age`` is descending date of birth).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from src.exceptions import ConfigurationError, InvalidSortExpressionException
from src.models.enums import ShapePair, SortDirection


@dataclass(frozen=True)
class PropertyMappingValue:
    destination_properties: tuple[str, ...]
    revert: bool = False

    def __post_init__(self) -> None:
        if not self.destination_properties:
            raise ValueError("A property mapping needs at least one destination property")


@dataclass(frozen=True)
class SortKey:
    """One key of an ordered multi-key sort, expressed in storage vocabulary."""

    field: str
    descending: bool = False


@dataclass(frozen=True)
class SortTerm:
    name: str
    descending: bool = False


def parse_sort_term(term: str) -> SortTerm | None:
    """Parse ``"<field> [asc|desc]"``; returns None when the term is malformed.

    The field name is trimmed and case-folded.
    """
    parts = term.split()
    if not parts or len(parts) > 2:
        return None
    descending = False
    if len(parts) == 2:
        direction = parts[1].casefold()
        if direction not in (SortDirection.ASC.value, SortDirection.DESC.value):
            return None
        descending = direction == SortDirection.DESC.value
    return SortTerm(name=parts[0].casefold(), descending=descending)


def _is_blank(sort_expression: str | None) -> bool:
    return sort_expression is None or not sort_expression.strip()


class PropertyMappingRegistry:
    """Read-only table of property mappings keyed by :class:`ShapePair`.

    Built once at application start-up; lookups never mutate it, so a single
    instance is shared by all requests.
    """

    def __init__(self, mappings: Mapping[ShapePair, Mapping[str, PropertyMappingValue]]) -> None:
        tables: dict[ShapePair, Mapping[str, PropertyMappingValue]] = {}
        for pair, mapping in mappings.items():
            table: dict[str, PropertyMappingValue] = {}
            for public_name, value in mapping.items():
                key = public_name.strip().casefold()
                if key in table:
                    raise ConfigurationError(
                        f"Public property '{public_name}' is registered twice for {pair.value}"
                    )
                table[key] = value
            tables[pair] = MappingProxyType(table)
        self._mappings = MappingProxyType(tables)

    def get_mapping(self, pair: ShapePair) -> Mapping[str, PropertyMappingValue]:
        try:
            return self._mappings[pair]
        except KeyError:
            raise ConfigurationError(f"Cannot find property mapping for {pair}") from None

    def is_valid_sort_expression(self, pair: ShapePair, sort_expression: str | None) -> bool:
        mapping = self.get_mapping(pair)
        if _is_blank(sort_expression):
            return True

        for raw_term in sort_expression.split(","):
            term = parse_sort_term(raw_term)
            if term is None or term.name not in mapping:
                return False
        return True

    def translate(self, pair: ShapePair, sort_expression: str | None) -> list[SortKey]:
        """Expand a client sort expression into storage sort keys, primary first."""
        mapping = self.get_mapping(pair)
        if _is_blank(sort_expression):
            return []

        keys: list[SortKey] = []
        for raw_term in sort_expression.split(","):
            term = parse_sort_term(raw_term)
            if term is None or term.name not in mapping:
                raise InvalidSortExpressionException(
                    f"Cannot sort by '{raw_term.strip()}'",
                    details=[{"field": "orderBy", "message": "Unknown sort field"}],
                )
            value = mapping[term.name]
            descending = term.descending != value.revert
            keys.extend(SortKey(field, descending) for field in value.destination_properties)
        return keys


def require_valid_sort_expression(
    registry: PropertyMappingRegistry, pair: ShapePair, sort_expression: str | None
) -> None:
    if not registry.is_valid_sort_expression(pair, sort_expression):
        raise InvalidSortExpressionException(
            f"Cannot sort by '{sort_expression}'",
            details=[{"field": "orderBy", "message": "Unknown sort field"}],
        )
