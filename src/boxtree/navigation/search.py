"""Criteria-based search over a folder's children."""

from __future__ import annotations

import re
from typing import Any, Mapping

TYPE_CRITERION: str = "type"

_ABSENT = object()

# Raised by a criterion applied to a value of the wrong shape.
_INAPPLICABLE = (TypeError, ValueError, KeyError, IndexError, AttributeError)


def find_items(folder: Any, criteria: Mapping[str, Any], *, recursive: bool = False) -> list[Any]:
    """
    Return the children of ``folder`` matching every criterion.

    The child listing is fully fetched first. In recursive mode the results
    of each sub-folder follow the direct matches, depth-first in listing
    order. Duplicates are kept.
    """
    children = [child for child in folder.all_items() if _is_item(child)]
    matches = [item for item in children if matches_criteria(item, criteria)]

    if recursive:
        for child in children:
            if child.item_type == "folder":
                matches.extend(find_items(child, criteria, recursive=True))

    return matches


def matches_criteria(item: Any, criteria: Mapping[str, Any]) -> bool:
    """
    True when ``item`` satisfies all ``criteria``.

    An attribute the item does not have is a non-match, and so is a value
    the criterion cannot be applied to (e.g. a predicate indexing a null
    ``shared_link``). Errors raised while fetching the item (network,
    permission, ...) propagate.
    """
    for key, expected in criteria.items():
        if key == TYPE_CRITERION:
            if item.item_type != expected:
                return False
            continue

        actual = item.get(key, _ABSENT)
        if actual is _ABSENT:
            return False
        try:
            if not value_matches(expected, actual):
                return False
        except _INAPPLICABLE:
            return False

    return True


def _is_item(value: Any) -> bool:
    # Entries of unregistered types (e.g. web links) stay raw mappings.
    return hasattr(value, "item_type")


def value_matches(expected: Any, actual: Any) -> bool:
    """Equality, regex search (for strings) or predicate call."""
    if isinstance(expected, re.Pattern):
        return isinstance(actual, str) and expected.search(actual) is not None
    if callable(expected) and not isinstance(expected, type):
        return bool(expected(actual))
    return expected == actual
