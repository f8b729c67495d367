"""Box folder discussion."""

from __future__ import annotations

from typing import Any, Mapping

from .factory import register_item_type
from .item import Item


@register_item_type("discussion")
class Discussion(Item):
    """A discussion thread attached to a folder."""

    def comments(self) -> list[Any]:
        response = self._api.get_discussion_comments(self.id)
        entries = response.get("entries")
        if entries is None:
            entries = response.get("comments")
        return [self._construct({"type": "comment", **c}) for c in entries or []]

    def add_comment(self, message: str) -> Any:
        response = self._api.add_discussion_comment(self.id, message)
        return self._construct({"type": "comment", **response})

    def update(self, **params: Any) -> Discussion:
        return Discussion(self._api, self._api.update_discussion(self.id, params))

    def delete(self) -> bool:
        return self._api.delete_discussion(self.id)

    def _get_info(self) -> Mapping[str, Any]:
        return self._api.get_discussion_info(self.id)
