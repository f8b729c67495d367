"""Assembly of a folder's children from paginated collection envelopes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence

from boxtree.errors import ApiError


@dataclass(frozen=True)
class CollectionPage:
    """
    One page of an ``item_collection`` envelope.

    Box sends ``{"total_count", "offset", "limit", "entries"}``.
    """

    total_count: int
    offset: int
    limit: int
    entries: Sequence[Any]

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> CollectionPage:
        entries = payload.get("entries") or []
        total = payload.get("total_count")
        offset = payload.get("offset", 0)
        limit = payload.get("limit", len(entries))

        if not isinstance(total, int) or not isinstance(offset, int) or not isinstance(limit, int):
            raise ApiError(
                "Malformed item collection",
                details={"total_count": total, "offset": offset, "limit": limit},
            )
        if not isinstance(entries, list):
            raise ApiError("Malformed item collection entries", details={"entries": entries})

        return cls(total_count=total, offset=offset, limit=limit, entries=entries)

    @property
    def size(self) -> int:
        """Number of slots this page is responsible for."""
        return max(0, min(self.total_count - self.offset, self.limit))


def merge_page(
    children: Optional[Sequence[Any]],
    page: CollectionPage,
    construct: Callable[[Any], Any] = lambda value: value,
) -> list[Any]:
    """
    Overwrite the page's slice of ``children`` and return a new list.

    Unfetched slots are ``None``. Merging the same page twice, or pages in
    any order, gives the same result. The list never grows past the page's
    ``total_count``.
    """
    merged = list(children or [])
    size = page.size
    end = page.offset + size

    if len(merged) < end:
        merged.extend([None] * (end - len(merged)))

    for index, entry in enumerate(page.entries[:size]):
        merged[page.offset + index] = construct(entry)

    del merged[max(page.total_count, 0):]
    return merged


def fetched_count(children: Optional[Sequence[Any]]) -> int:
    """Number of slots that hold a fetched entry."""
    return sum(1 for child in children or [] if child is not None)


def first_hole(children: Optional[Sequence[Any]]) -> int:
    """Index of the first unfetched slot (``len(children)`` when dense)."""
    items = list(children or [])
    for index, child in enumerate(items):
        if child is None:
            return index
    return len(items)
