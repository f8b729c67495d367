"""Box comment."""

from __future__ import annotations

from typing import Any, Mapping

from .factory import register_item_type
from .item import Item, attribute


@register_item_type("comment")
class Comment(Item):
    """A comment left on a file or in a discussion."""

    message = attribute("message")
    is_reply_comment = attribute("is_reply_comment")

    @property
    def item(self) -> Any:
        """The file (or discussion) this comment belongs to."""
        return self.get("item", None)

    def update(self, message: str) -> Comment:
        return Comment(self._api, self._api.update_comment(self.id, message))

    def delete(self) -> bool:
        return self._api.delete_comment(self.id)

    def _get_info(self) -> Mapping[str, Any]:
        return self._api.get_comment_info(self.id)
