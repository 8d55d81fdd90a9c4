"""Spread, starred unpacking, nested extraction, and shallow copies."""

from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import Any

from showcase.domain import Person


def extend(items: Sequence[Any], *extra: Any) -> list[Any]:
    """Return a new list with items followed by extra. items is not modified."""
    return [*items, *extra]


def split_head(sequence: Sequence[Any]) -> tuple[Any, Any, list[Any]]:
    """Return (first, second, rest). Requires at least two items."""
    if len(sequence) < 2:
        raise ValueError("split_head() needs at least two items.")
    first, second, *rest = sequence
    return first, second, rest


def extract_name_and_city(record: Mapping[str, Any]) -> tuple[str, str]:
    """Pull name (as person_name) and address.city out of a nested record. Read-only."""
    match record:
        case {"name": person_name, "address": {"city": city}}:
            return person_name, city
    raise KeyError("Record must contain 'name' and 'address.city'.")


def clone_record(record: Mapping[str, Any]) -> dict[str, Any]:
    """Shallow copy: top-level keys are new, nested values are shared."""
    return {**record}


def clone_person(person: Person) -> Person:
    return replace(person)
