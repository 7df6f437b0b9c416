"""
Predicate-based selection over record collections.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

Record = Mapping[str, Any]
Predicate = Callable[[Record], bool]


class Comparator(Enum):
    """How a filter condition compares a record field with its target value."""

    EQ = "eq"
    CONTAINS = "contains"


def filter_records(collection: Iterable[Record], predicate: Predicate) -> list[Record]:
    """Return the records matching ``predicate``, in their original order."""
    return [record for record in collection if predicate(record)]


def equals(field_name: str, value: Any) -> Predicate:
    """Match records whose ``field_name`` equals ``value``.

    Records without the field never match.
    """
    missing = object()

    def predicate(record: Record) -> bool:
        return record.get(field_name, missing) == value

    return predicate


def contains(field_name: str, value: Any) -> Predicate:
    """Match records whose array field ``field_name`` holds ``value``.

    An empty or missing ``value`` disables the filter.
    """
    if value is None or value == "":
        return match_all

    def predicate(record: Record) -> bool:
        items = record.get(field_name)
        if not isinstance(items, Sequence) or isinstance(items, str):
            return False
        return value in items

    return predicate


def match_all(record: Record) -> bool:
    _ = record
    return True


def all_of(*predicates: Predicate) -> Predicate:
    """Combine predicates with logical AND; no predicates matches everything."""
    if not predicates:
        return match_all

    def predicate(record: Record) -> bool:
        return all(p(record) for p in predicates)

    return predicate


@dataclass(frozen=True)
class Condition:
    """A single ``(field, comparator, value)`` filter condition."""

    field: str
    comparator: Comparator
    value: Any

    def predicate(self) -> Predicate:
        if self.comparator is Comparator.CONTAINS:
            return contains(self.field, self.value)
        return equals(self.field, self.value)


@dataclass(frozen=True)
class FilterSpec:
    """A conjunction of filter conditions."""

    conditions: tuple[Condition, ...] = field(default_factory=tuple)

    def where(self, field_name: str, comparator: Comparator, value: Any) -> FilterSpec:
        """Return a new spec with one more condition."""
        return FilterSpec(self.conditions + (Condition(field_name, comparator, value),))

    def predicate(self) -> Predicate:
        return all_of(*(condition.predicate() for condition in self.conditions))

    def apply(self, collection: Iterable[Record]) -> list[Record]:
        return filter_records(collection, self.predicate())
