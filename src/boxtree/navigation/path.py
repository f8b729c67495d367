"""Unix-style path resolution against a folder tree."""

from __future__ import annotations

from typing import Any, Optional

from .search import find_items

SEPARATOR: str = "/"
FOLDER_TYPE: str = "folder"


def resolve_path(start: Any, path: str) -> Optional[Any]:
    """
    Return the item ``path`` points to from ``start``, or None.

    - A leading "/" starts from the root (found by walking parents).
    - "" and "." stay put, ".." goes to the parent.
    - Any other segment is looked up by exact name among the current
      folder's direct children; the first match wins.
    - A trailing "/" requires the result to be a folder.
    """
    current: Optional[Any] = start
    container: Optional[Any] = None

    if path.startswith(SEPARATOR):
        current = find_root(start)

    for segment in path.split(SEPARATOR):
        if segment in ("", "."):
            continue

        if segment == "..":
            current = current.parent
            container = None
        else:
            if current.item_type != FOLDER_TYPE:
                return None
            container = current
            found = find_items(current, {"name": segment})
            current = found[0] if found else None

        if current is None:
            return None

    if path.endswith(SEPARATOR) and current.item_type != FOLDER_TYPE:
        if container is None:
            return None
        folders = find_items(container, {"type": FOLDER_TYPE, "name": current.name})
        return folders[0] if folders else None

    return current


def find_root(item: Any) -> Any:
    """Follow ``parent`` links until an item without parent is reached."""
    current = item
    while True:
        parent = current.parent
        if parent is None:
            return current
        current = parent
