"""
Criteria matching for record scans.

A criteria mapping pairs a field path with an expected value. A record matches
when every criterion is satisfied:

- the path is a top-level key whose value strictly equals the expected value, or
- the path is dotted (``"a.b.c"``) and walking nested mappings one segment at a
  time reaches a value that strictly equals the expected value.

The nested walk is only attempted after the top-level check fails, and only for
paths containing a dot. A path that cannot be walked is simply not matched.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

_NOT_FOUND = object()


def strict_equal(left: Any, right: Any) -> bool:
    """Type-sensitive deep equality: ``1``, ``1.0``, ``True`` and ``"1"`` all differ."""
    if type(left) is not type(right):
        return False
    if isinstance(left, dict):
        if left.keys() != right.keys():
            return False
        return all(strict_equal(v, right[k]) for k, v in left.items())
    if isinstance(left, list):
        if len(left) != len(right):
            return False
        return all(strict_equal(a, b) for a, b in zip(left, right))
    return left == right


def resolve_path(record: Mapping[str, Any], path: str) -> tuple[bool, Any]:
    current: Any = record
    for segment in path.split("."):
        if not isinstance(current, Mapping):
            return False, None
        current = current.get(segment, _NOT_FOUND)
        if current is _NOT_FOUND:
            return False, None
    return True, current


def _criterion_holds(record: Mapping[str, Any], path: str, expected: Any) -> bool:
    # Records only have string keys.
    if not isinstance(path, str):
        return False
    if path in record and strict_equal(record[path], expected):
        return True
    if "." not in path:
        return False
    found, value = resolve_path(record, path)
    return found and strict_equal(value, expected)


def matches(record: Mapping[str, Any], criteria: Mapping[str, Any]) -> bool:
    # An empty criteria mapping matches everything.
    return all(_criterion_holds(record, path, expected) for path, expected in criteria.items())


def find(records: Iterable[Mapping[str, Any]], criteria: Mapping[str, Any], limit: int = 0) -> list:
    """
    Return records matching `criteria` in iteration order, stopping once `limit`
    results are collected (0 means no limit).
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    results = []
    for record in records:
        if not matches(record, criteria):
            continue
        results.append(record)
        if limit and len(results) >= limit:
            break
    return results
