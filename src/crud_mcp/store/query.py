"""Exact-match query filtering for record listings."""

from collections.abc import Iterable, Mapping
from typing import Any

_MISSING = object()


def strict_equals(left: Any, right: Any) -> bool:
    """Compare two JSON values without type coercion.

    Booleans only equal booleans, strings only equal strings. Integers and
    floats are both JSON numbers and compare numerically.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right

    if isinstance(left, int | float) and isinstance(right, int | float):
        return left == right

    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if left.keys() != right.keys():
            return False
        return all(strict_equals(left[key], right[key]) for key in left)

    if isinstance(left, list | tuple) and isinstance(right, list | tuple):
        if len(left) != len(right):
            return False
        return all(strict_equals(a, b) for a, b in zip(left, right, strict=True))

    if type(left) is not type(right):
        return False
    return left == right


def matches_query(record: Mapping[str, Any], query: Mapping[str, Any] | None) -> bool:
    """Return True if every query field is present on the record with an equal value."""
    if not query:
        return True
    for key, expected in query.items():
        actual = record.get(key, _MISSING)
        if actual is _MISSING or not strict_equals(actual, expected):
            return False
    return True


def filter_records(
    records: Iterable[Mapping[str, Any]], query: Mapping[str, Any] | None
) -> list[Any]:
    """Keep the records that match ``query``, preserving order.

    An empty or absent query returns the records unchanged.
    """
    if not query:
        return list(records)
    return [record for record in records if matches_query(record, query)]
