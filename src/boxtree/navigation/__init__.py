"""Tree navigation: path resolution and criteria search."""

from __future__ import annotations

from .path import find_root, resolve_path
from .search import find_items, matches_criteria, value_matches

__all__ = [
    "resolve_path",
    "find_root",
    "find_items",
    "matches_criteria",
    "value_matches",
]
