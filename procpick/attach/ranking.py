"""Ordering of attach items.

Python processes come first, ordered by their command line, since the
script and its arguments are what the user recognizes. Everything else
follows, ordered by process name. All comparisons ignore case.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key

from .types import AttachItem

__all__ = ["compare_items", "dedupe_by_pid", "sort_attach_items"]


def _compare_text(a: str, b: str) -> int:
    # Plain < on lower-cased strings, much faster than locale collation
    a_lower = a.lower()
    b_lower = b.lower()
    if a_lower == b_lower:
        return 0
    return -1 if a_lower < b_lower else 1


def compare_items(a: AttachItem, b: AttachItem) -> int:
    a_python = a.is_python
    b_python = b.is_python

    if a_python and b_python:
        return _compare_text(a.command_line, b.command_line)
    if a_python:
        return -1
    if b_python:
        return 1
    return _compare_text(a.process_name, b.process_name)


def dedupe_by_pid(items: Iterable[AttachItem]) -> list[AttachItem]:
    """Keep the first item seen for each pid."""
    seen: set[int] = set()
    unique: list[AttachItem] = []
    for item in items:
        if item.pid in seen:
            continue
        seen.add(item.pid)
        unique.append(item)
    return unique


def sort_attach_items(items: Iterable[AttachItem]) -> list[AttachItem]:
    """De-duplicate by pid and return a new, stably sorted list."""
    return sorted(dedupe_by_pid(items), key=cmp_to_key(compare_items))
